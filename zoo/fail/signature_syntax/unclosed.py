from defunctionalize import defunctionalize

@defunctionalize("fn(x: int -> int")
class broken:
	def ident(x: int) -> int:
		return x
