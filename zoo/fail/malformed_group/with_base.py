from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step(object):
	def ident(n: int) -> int:
		return n
