from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def scaled(factor, n: int) -> int:
		return factor * n
