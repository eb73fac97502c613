from defunctionalize import defunctionalize

@defunctionalize("fn(rhs: int) -> int")
class step:
	def sub(x: int, y: int) -> int:
		return x - y
	def halve(x: float) -> int:
		return int(x / 2)
