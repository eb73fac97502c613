from defunctionalize import defunctionalize

@defunctionalize("(x: int) -> int")
class broken:
	def ident(x: int) -> int:
		return x
