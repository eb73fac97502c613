from defunctionalize import defunctionalize

@defunctionalize("fn(x: int, y: int) -> int")
class arithmetic:
	def add(x: int, y: int) -> int:
		return x + y
	def sub(x: int, y: int) -> int:
		return x - y
	def mult(x: int, y: int) -> int:
		return x * y

assert Mult().call(6, 7) == 42
assert Add()(40, 2) == 42
assert [op.call(8, 2) for op in (Add(), Sub(), Mult())] == [10, 6, 16]
