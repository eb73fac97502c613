from defunctionalize import defunctionalize

@defunctionalize("fn(x: int, y: int) -> int")
class arithmetic:
	def add(x: int, y: int) -> int:
		return x + y
	def negate(x: int) -> int:
		return -x
