from defunctionalize import defunctionalize

@defunctionalize
class step:
	def ident(n: int) -> int:
		return n
