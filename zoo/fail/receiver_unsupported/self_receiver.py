from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def ident(self, n: int) -> int:
		return n
