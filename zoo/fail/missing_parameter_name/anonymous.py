from defunctionalize import defunctionalize

@defunctionalize("fn(int) -> int")
class broken:
	def ident(x: int) -> int:
		return x
