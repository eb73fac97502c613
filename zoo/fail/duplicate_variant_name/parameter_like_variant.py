from defunctionalize import defunctionalize

@defunctionalize("fn(Double: int) -> int")
class step:
	def double(n: int) -> int:
		return n * 2
