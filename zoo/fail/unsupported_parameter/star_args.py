from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	def total(*more: int, n: int) -> int:
		return n + sum(more)
