"""
Building the union type and its dispatch from validated candidates,
and putting the pieces in order for the code generator.
None of this can fail: every check has already happened.
"""
from typing import Sequence, Union
from .syntax import (
	Group, CallSignature, Declaration, Candidate, Variant, UnionType, Branch, Dispatch,
)

def synthesize_union(name:str, signature:CallSignature, group:Group, candidates:Sequence[Candidate]) -> UnionType:
	variants = tuple(Variant(c.variant_name, c.extra_fields, c) for c in candidates)
	return UnionType(
		name=name,
		generic_params=signature.generic_params,
		where_clause=signature.where_clause,
		annotations=group.annotations,
		variants=variants,
		doc=group.doc,
	)

def synthesize_dispatch(union:UnionType, signature:CallSignature) -> Dispatch:
	"""
	One branch per variant, and no fallback. Each branch supplies the
	candidate's parameters positionally: first the variant's fields,
	then the arguments of the call.
	"""
	call_arguments = tuple(p.nom.text for p in signature.parameters)
	branches = []
	for v in union.variants:
		field_arguments = tuple("self." + f.nom.text for f in v.fields)
		branches.append(Branch(v, v.candidate.function, field_arguments + call_arguments))
	return Dispatch(union, signature, tuple(branches))

def emit(passthrough:Sequence[Declaration], union:UnionType, dispatch:Dispatch) -> list[Union[Declaration, UnionType, Dispatch]]:
	""" Passthrough members first, in their original order, then the union, then its dispatch. """
	return [*passthrough, union, dispatch]
