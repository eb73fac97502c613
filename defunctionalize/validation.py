"""
Deciding which members of a group become variants, and checking that each
of them fits the shared call signature. Any problem is fatal to the group,
so every check here raises a Defect rather than collecting a list.
"""
from typing import Sequence
from .ontology import Nom
from .diagnostics import Defect, ErrorKind
from .syntax import (
	Declaration, Function, Visibility, CallSignature, ParamKind,
	ExtraField, Candidate,
)
from .identifiers import pascal_case

RECEIVERS = frozenset(["self", "cls"])
METHODS = frozenset(["call", "apply"])

def partition(members:Sequence[Declaration]) -> tuple[list[Function], list[Declaration]]:
	""" Public functions are candidates. Everything else passes through, in order. """
	candidates, passthrough = [], []
	for m in members:
		if isinstance(m, Function) and m.visibility is Visibility.PUBLIC:
			candidates.append(m)
		else:
			passthrough.append(m)
	return candidates, passthrough

def validate_candidate(function:Function, signature:CallSignature) -> tuple[ExtraField, ...]:
	"""
	Check one candidate against the signature. The parameters in front of
	the shared suffix become the variant's extra fields, in order.
	"""
	fn_name = function.nom.text
	if function.is_async:
		raise Defect(ErrorKind.AsyncCandidateUnsupported, function.nom, "`%s` is async; an async candidate cannot share a synchronous dispatch." % fn_name)
	_check_receiver(function)
	for p in function.parameters:
		if p.kind is not ParamKind.POSITIONAL:
			message = "`%s` takes a %s parameter `%s`; candidates take positional parameters only." % (fn_name, p.kind.value.replace("_", " "), p.nom.text)
			raise Defect(ErrorKind.UnsupportedParameter, p, message)
	if function.generics:
		message = "`%s` declares its own type parameters; only the signature may be generic." % fn_name
		raise Defect(ErrorKind.CandidateGenericsUnsupported, function.generics[0], message)
	for p in function.parameters:
		if p.type_expr is None:
			raise Defect(ErrorKind.MissingTypeAnnotation, p, "Parameter `%s` of `%s` needs a type annotation." % (p.nom.text, fn_name))

	need, have = signature.arity(), len(function.parameters)
	if have < need:
		message = "`%s` takes %d parameter(s) but the signature passes %d." % (fn_name, have, need)
		raise Defect(ErrorKind.ArityTooSmall, function.nom, message)

	split = have - need
	prefix, suffix = function.parameters[:split], function.parameters[split:]
	for position, (mine, theirs) in enumerate(zip(suffix, signature.parameters), 1):
		if mine.type_expr != theirs.type_expr:
			message = "At position %d of the shared parameters, `%s` has type `%s` where the signature says `%s`." % (
				position, fn_name, mine.type_expr.text, theirs.type_expr.text,
			)
			raise Defect(ErrorKind.TypeMismatch, mine.type_expr, message)

	if function.result_type != signature.result_type:
		message = "`%s` returns `%s` but the signature returns `%s`." % (fn_name, function.result_type.text, signature.result_type.text)
		raise Defect(ErrorKind.ReturnTypeMismatch, function.result_type, message)

	for p in prefix:
		if p.nom.text in METHODS:
			message = "`%s` would become a field of `%s` and hide its `%s` method; please choose another name." % (p.nom.text, fn_name, p.nom.text)
			raise Defect(ErrorKind.UnsupportedParameter, p, message)

	return tuple(ExtraField(p.nom, p.type_expr) for p in prefix)

def _check_receiver(function:Function):
	for d in function.decorators:
		if d.text == "classmethod":
			raise Defect(ErrorKind.ReceiverUnsupported, d, "`%s` is a classmethod; candidates take no receiver." % function.nom.text)
	if function.parameters and function.parameters[0].nom.text in RECEIVERS:
		first = function.parameters[0]
		message = "`%s` takes `%s` as a receiver; candidates are plain functions." % (function.nom.text, first.nom.text)
		raise Defect(ErrorKind.ReceiverUnsupported, first, message)

def name_candidates(functions:Sequence[Function], signature:CallSignature, union_name:str) -> list[Candidate]:
	""" Validate every candidate and give each a distinct variant name. """
	seen = {}
	candidates = []
	for fn in functions:
		extra_fields = validate_candidate(fn, signature)
		variant_name = pascal_case(fn.nom.text)
		if variant_name == union_name:
			message = "`%s` would make a variant named `%s`, which is the name of the union itself." % (fn.nom.text, variant_name)
			raise Defect(ErrorKind.DuplicateVariantName, fn.nom, message)
		if variant_name in seen:
			message = "`%s` and `%s` would both make a variant named `%s`." % (seen[variant_name].text, fn.nom.text, variant_name)
			raise Defect(ErrorKind.DuplicateVariantName, fn.nom, message)
		seen[variant_name] = fn.nom
		candidates.append(Candidate(fn, extra_fields, variant_name))
	for p in signature.parameters:
		if p.nom.text in seen:
			message = "Parameter `%s` has the name of a variant, which the dispatch must be able to see." % p.nom.text
			raise Defect(ErrorKind.DuplicateVariantName, p.nom, message)
	return candidates

def union_name(group_nom:Nom, signature:CallSignature) -> str:
	""" An explicit name is used as written; otherwise the group name is Pascal-cased. """
	if signature.explicit_name is not None:
		return signature.explicit_name.text
	return pascal_case(group_nom.text)
