from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def ident(n: int, **options: str) -> int:
		return n
