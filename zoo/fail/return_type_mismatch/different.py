from defunctionalize import defunctionalize

@defunctionalize("fn(x: int) -> int")
class step:
	def describe(x: int) -> str:
		return str(x)
