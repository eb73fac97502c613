from defunctionalize import defunctionalize

SIGNATURE = "fn(n: int) -> int"

@defunctionalize(SIGNATURE)
class step:
	def ident(n: int) -> int:
		return n
