"""
Rendering the emitted declarations as Python text.

The union becomes a base class deriving from DeFn, with the dispatch
as its `call` method. Each variant becomes a frozen dataclass deriving
from the base. Each candidate's definition lands at module level
under a private name, so that its free names mean exactly what they
meant inside the group, and the dispatch calls it positionally.

Annotations on generated code are written as strings, because the types
may mention classes defined further down the module (often the union itself).
"""
import re
from typing import Sequence
from boozetools.support.foundation import Visitor
from .syntax import Function, Other, UnionType, Dispatch, TypeExpr

PROLOGUE = (
	"import dataclasses as _dataclasses\n"
	"import typing as _typing\n"
	"from defunctionalize.runtime import DeFn as _DeFn\n"
	"_isinstance = isinstance\n"
)
BASE = "_DeFn"
FROZEN = "@_dataclasses.dataclass(frozen=True)"
DISPATCH = "call"

def render(declarations:Sequence, indent:str="\t") -> str:
	""" Text for a group's replacement, ending with a newline. """
	gen = CodeGenerator(indent)
	return "\n\n\n".join(gen.visit(d) for d in declarations) + "\n"

def implementation_name(union:UnionType, function:Function) -> str:
	return "_%s_%s" % (union.name, function.nom.text)

def _quote(text:str) -> str:
	if '"' in text or '\\' in text: return repr(text)
	return '"%s"' % text

def _annotation(type_expr:TypeExpr) -> str:
	return _quote(type_expr.text)

class CodeGenerator(Visitor):
	def __init__(self, indent:str):
		self.indent = indent

	def visit_Other(self, other:Other):
		return other.excerpt.text.rstrip("\n")

	def visit_Function(self, function:Function):
		return function.body.rstrip("\n")

	def visit_UnionType(self, union:UnionType):
		lines = []
		for g in union.generic_params:
			if g.bounds is None: lines.append('%s = _typing.TypeVar("%s")' % (g.nom.text, g.nom.text))
			else: lines.append('%s = _typing.TypeVar("%s", bound=%s)' % (g.nom.text, g.nom.text, _annotation(g.bounds)))
		if lines: lines.append("")
		bases = [BASE]
		if union.is_generic():
			bases.append("_typing.Generic[%s]" % self.type_arguments(union))
		lines.append("class %s(%s):" % (union.name, ", ".join(bases)))
		if union.doc is not None:
			lines.append(self.docstring(union.doc, 1))
		if union.where_clause:
			lines.append(self.indent + "# where " + ", ".join(p.text for p in union.where_clause))
		return "\n".join(lines)

	def visit_Dispatch(self, dispatch:Dispatch):
		""" The `call` method, which finishes the base class, then the variants, then the implementations. """
		chunks = [self.dispatch_method(dispatch)]
		chunks.extend(self.variant_class(dispatch.union, v) for v in dispatch.union.variants)
		chunks.extend(self.implementation(dispatch.union, b.function) for b in dispatch.branches)
		return "\n\n\n".join(chunks)

	def dispatch_method(self, dispatch:Dispatch) -> str:
		i1, i2, i3 = (self.indent * n for n in (1, 2, 3))
		signature = dispatch.signature
		params = "".join(", %s: %s" % (p.nom.text, _annotation(p.type_expr)) for p in signature.parameters)
		lines = [
			"%sdef %s(self%s) -> %s:" % (i1, DISPATCH, params, _annotation(signature.result_type)),
			'%s""" Evaluate the function this value stands for. """' % i2,
		]
		for b in dispatch.branches:
			lines.append("%sif _isinstance(self, %s):" % (i2, b.variant.name))
			lines.append("%sreturn %s(%s)" % (i3, implementation_name(dispatch.union, b.function), ", ".join(b.arguments)))
		return "\n".join(lines)

	def variant_class(self, union:UnionType, variant) -> str:
		lines = ["@" + a.text for a in union.annotations]
		lines.append(FROZEN)
		parent = union.name
		if union.is_generic(): parent += "[%s]" % self.type_arguments(union)
		lines.append("class %s(%s):" % (variant.name, parent))
		for f in variant.fields:
			lines.append("%s%s: %s" % (self.indent, f.nom.text, _annotation(f.type_expr)))
		if variant.is_unit():
			lines.append(self.indent + "pass")
		return "\n".join(lines)

	def implementation(self, union:UnionType, function:Function) -> str:
		pattern = r'\bdef\s+%s\b' % re.escape(function.nom.text)
		return re.sub(pattern, "def " + implementation_name(union, function), function.body, count=1).rstrip("\n")

	def type_arguments(self, union:UnionType) -> str:
		return ", ".join(g.nom.text for g in union.generic_params)

	def docstring(self, doc:str, depth:int) -> str:
		margin = self.indent * depth
		if '"""' in doc or '\\' in doc or doc.endswith('"'):
			return margin + repr(doc)
		lines = doc.splitlines()
		if len(lines) <= 1:
			return '%s""" %s """' % (margin, doc)
		body = "\n".join((margin + line) if line else "" for line in lines)
		return '%s"""\n%s\n%s"""' % (margin, body, margin)
