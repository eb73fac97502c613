"""
The whole transformation of one group, start to finish.
"""
from typing import Optional
from . import front_end, validation, synthesis
from .diagnostics import Report
from .syntax import Group

def defunctionalize_group(group:Group, report:Optional[Report]=None) -> list:
	"""
	Return the declarations that replace the group, or raise a Defect
	describing the first thing wrong with it. Nothing is emitted for a
	group with a defect.
	"""
	info = report.info if report else _quiet
	signature = front_end.parse_signature(group.attribute)
	info("Signature of", group.nom.text, "is", signature)
	name = validation.union_name(group.nom, signature)
	functions, passthrough = validation.partition(group.members)
	info("Candidates:", ", ".join(f.nom.text for f in functions) or "(none)")
	candidates = validation.name_candidates(functions, signature, name)
	union = synthesis.synthesize_union(name, signature, group, candidates)
	dispatch = synthesis.synthesize_dispatch(union, signature)
	info("Union", name, "has", len(union.variants), "variant(s)")
	return synthesis.emit(passthrough, union, dispatch)

def _quiet(*args): pass
