from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class adders:
	def add_plus_n(k: int, n: int) -> int:
		return k + n
	def addPlusN(k: int, n: int) -> int:
		return n + k
