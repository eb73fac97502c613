from defunctionalize import defunctionalize

registry = []

def register(cls):
	registry.append(cls.__name__)
	return cls

def tagged(tag):
	def decorate(cls):
		cls.tag = tag
		return cls
	return decorate

@register
@defunctionalize("fn Predicate(n: int) -> bool")
@tagged("predicates")
class tests_on_numbers:
	def is_even(n: int) -> bool:
		return n % 2 == 0
	def greater_than(limit: int, n: int) -> bool:
		return n > limit

assert registry == ["IsEven", "GreaterThan"]
assert IsEven.tag == GreaterThan.tag == "predicates"
assert not hasattr(Predicate, "tag")
assert GreaterThan(3).call(4) and not IsEven().call(3)
