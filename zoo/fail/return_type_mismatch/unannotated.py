from defunctionalize import defunctionalize

@defunctionalize("fn(x: int) -> int")
class step:
	def forget(x: int):
		print(x)
