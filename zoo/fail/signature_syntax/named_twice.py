from defunctionalize import defunctionalize

@defunctionalize("fn(x: int, x: int) -> int")
class broken:
	def first(x: int, y: int) -> int:
		return x
