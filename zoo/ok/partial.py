from defunctionalize import defunctionalize

@defunctionalize("fn(rhs: int) -> int")
class step:
	""" One step of a calculation. """
	def sub(x: int, y: int) -> int:
		return x - y
	def scale(factor: int, offset: int, value: int) -> int:
		return factor * value + offset
	def double(rhs: int) -> int:
		return rhs * 2

assert Sub(49).call(7) == 42
assert Scale(10, 2).apply((4,)) == 42
assert Double()(21) == 42
assert Sub(49) == Sub(49) and Sub(49) != Sub(50)
assert len({Sub(1), Sub(1), Double()}) == 2
assert Step.__doc__.strip() == "One step of a calculation."
