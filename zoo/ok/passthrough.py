"""
Private helpers and other statements leave the group for module level.
"""
from defunctionalize import defunctionalize

LIMIT = 100

@defunctionalize("fn(text: str) -> str")
class transform:
	SEPARATOR = "-"

	def _clip(text: str) -> str:
		"""
	Shorten long text.
Continuation lines of a string keep their margins.
		"""
		return text[:LIMIT]

	@staticmethod
	def upper(text: str) -> str:
		return _clip(text).upper()

	def join_with(other: str, text: str) -> str:
		return SEPARATOR.join([_clip(text), other])

	def shout(times: int, text: str) -> str:
		return text.upper() + "!" * times

assert Upper().call("abc") == "ABC"
assert JoinWith("z").call("a") == "a-z"
assert Shout(3).call("hey") == "HEY!!!"
assert SEPARATOR == "-"
assert len(_clip("x" * 500)) == LIMIT
