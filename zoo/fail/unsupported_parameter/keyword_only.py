from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def ident(n: int, *, verbose: bool = False) -> int:
		return n
