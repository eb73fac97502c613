from defunctionalize import defunctionalize

def factory():
	@defunctionalize("fn(n: int) -> int")
	class step:
		def ident(n: int) -> int:
			return n
	return step
