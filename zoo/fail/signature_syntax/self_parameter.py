from defunctionalize import defunctionalize

@defunctionalize("fn(self: int) -> int")
class broken:
	def ident(x: int) -> int:
		return x
