import pickle
from defunctionalize import defunctionalize


@defunctionalize("fn() -> str")
class greeting:
	def hello() -> str:
		return "Hello"
	def named(name: str) -> str:
		return "Hello, " + name


def between_the_groups():
	return "untouched"


@defunctionalize("fn(message: str)")
class sink:
	def to_list(target: list, message: str):
		target.append(message)
	def discard(message: str) -> None:
		pass


box = []
for g in (Hello(), Named("world")):
	ToList(box).call(g.call())
assert Discard().call("nothing") is None
assert box == ["Hello", "Hello, world"]
assert between_the_groups() == "untouched"
assert pickle.loads(pickle.dumps(Named("x"))) == Named("x")
