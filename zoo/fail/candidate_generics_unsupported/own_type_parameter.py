from defunctionalize import defunctionalize

@defunctionalize("fn(x: int) -> int")
class step:
	def ident[T](x: int) -> int:
		return x
