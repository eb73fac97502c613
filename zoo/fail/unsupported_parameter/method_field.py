from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def scale(call: int, n: int) -> int:
		return call * n
