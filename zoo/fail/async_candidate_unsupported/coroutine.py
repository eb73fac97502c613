from defunctionalize import defunctionalize

@defunctionalize("fn(n: int) -> int")
class step:
	async def ident(n: int) -> int:
		return n
