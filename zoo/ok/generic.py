from typing import Callable
from defunctionalize import defunctionalize

@defunctionalize("fn Reducer<T>(acc: T, item: T) -> T where T: Addable")
class reducers:
	def keep_first(acc: T, item: T) -> T:
		return acc
	def combine(weight: int, acc: T, item: T) -> T:
		return acc + item * weight
	def apply_fn(fn: Callable[[T, T], T], acc: T, item: T) -> T:
		return fn(acc, item)

def fold(reducer: Reducer, items):
	acc, *rest = items
	for item in rest:
		acc = reducer.call(acc, item)
	return acc

assert fold(KeepFirst(), [3, 4, 5]) == 3
assert fold(Combine(2), [1, 2, 3]) == 11
assert fold(ApplyFn(max), [3, 9, 4]) == 9
assert issubclass(Combine, Reducer)
