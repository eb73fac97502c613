"""
Between Python modules and the engine.

A group is a top-level class statement decorated with
`@defunctionalize("fn(...) -> ...")`. This module finds those, reads
them into the engine's records by way of Python's own `ast`, and
splices the generated code back in where each class used to be.
"""
import ast
import re
from pathlib import Path
from typing import NamedTuple, Optional

from .ontology import Nom, Excerpt
from .diagnostics import Report, Defect, ErrorKind
from .location import LineIndex
from .syntax import Attribute, Group, Function, Other, Parameter, ParamKind, unit_type
from . import front_end, engine, codegen

MARKER = "defunctionalize"
STATICMETHOD = "staticmethod"
_def_keyword = re.compile(r'(async\s+)?def\s+')
_class_keyword = re.compile(r'class\s+')
_string_prefix = re.compile(r'[A-Za-z]*("""|\'\'\'|"|\')')

class Site(NamedTuple):
	""" A group as found in the host text, by first and last line (from one, inclusive). """
	group: Group
	first_line: int
	last_line: int
	indent: str

def is_marker(decorator:ast.expr) -> bool:
	if isinstance(decorator, ast.Call): decorator = decorator.func
	if isinstance(decorator, ast.Name): return decorator.id == MARKER
	if isinstance(decorator, ast.Attribute): return decorator.attr == MARKER
	return False

def _marker_of(node) -> Optional[ast.expr]:
	for d in getattr(node, "decorator_list", ()):
		if is_marker(d): return d

class Reader:
	""" Reads groups out of one module's text. """
	def __init__(self, text:str, path:Optional[Path]=None):
		self.text = text
		self.index = LineIndex(text)
		self.module = ast.parse(text, filename="<unknown>" if path is None else str(path))

	def group_nodes(self) -> list[ast.ClassDef]:
		""" Every class statement carrying the marker, top-level or not, in source order. """
		found = [n for n in ast.walk(self.module) if isinstance(n, ast.ClassDef) and _marker_of(n) is not None]
		return sorted(found, key=lambda n: (n.lineno, n.col_offset))

	def at(self, node) -> int:
		return self.index.offset(node.lineno, node.col_offset)

	def segment(self, node) -> Excerpt:
		left, right = self.index.node_span(node)
		return Excerpt(self.text[left:right], left, right)

	def keyword_name(self, node, keyword:re.Pattern, name:str) -> Nom:
		start = self.at(node)
		m = keyword.match(self.text, start)
		if m: start = m.end()
		return Nom(name, start)

	def read(self, node:ast.ClassDef) -> Site:
		""" Convert one group, or raise a Defect if it is not a proper group. """
		nom = self.keyword_name(node, _class_keyword, node.name)
		if node not in self.module.body:
			raise Defect(ErrorKind.MalformedGroup, nom, "`%s` is marked to defunctionalize but is not at the top level of its module." % node.name)
		if node.bases or node.keywords or getattr(node, "type_params", None):
			raise Defect(ErrorKind.MalformedGroup, nom, "Group `%s` is a namespace; it takes no base classes, keywords or type parameters." % node.name)
		marker = _marker_of(node)
		attribute = self.attribute(node, marker, nom)
		annotations = [self.segment(d) for d in node.decorator_list if d is not marker]
		members = []
		body = node.body
		doc = ast.get_docstring(node)
		if doc is not None:
			doc = doc.strip()
			body = body[1:]
		for stmt in body:
			if isinstance(stmt, ast.Pass): continue
			if isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
				members.append(self.function(stmt))
			else:
				members.append(Other(self.excerpt(stmt, node)))
		first_line = min([node.lineno] + [d.lineno for d in node.decorator_list])
		group = Group(nom, attribute, annotations, members, doc)
		return Site(group, first_line, node.end_lineno, self.body_indent(node))

	def attribute(self, node:ast.ClassDef, marker:ast.expr, nom:Nom) -> Attribute:
		if not isinstance(marker, ast.Call):
			raise Defect(ErrorKind.MalformedGroup, nom, "Group `%s` needs its signature, as in `@defunctionalize(\"fn(x: int) -> int\")`." % node.name)
		args = marker.args
		if marker.keywords or len(args) != 1 or not (isinstance(args[0], ast.Constant) and isinstance(args[0].value, str)):
			raise Defect(ErrorKind.MalformedGroup, self.segment(marker), "The marker on `%s` takes exactly one argument: the signature, as a string literal." % node.name)
		literal = args[0]
		start = self.at(literal)
		m = _string_prefix.match(self.text, start)
		if m: start = m.end()
		return Attribute(literal.value, start)

	def function(self, stmt) -> Function:
		nom = self.keyword_name(stmt, _def_keyword, stmt.name)
		a = stmt.args
		parameters = [self.parameter(p, ParamKind.POSITIONAL) for p in a.posonlyargs + a.args]
		if a.vararg: parameters.append(self.parameter(a.vararg, ParamKind.VARIADIC))
		parameters.extend(self.parameter(p, ParamKind.KEYWORD) for p in a.kwonlyargs)
		if a.kwarg: parameters.append(self.parameter(a.kwarg, ParamKind.VARIADIC_KEYWORD))
		if stmt.returns is None: result_type = unit_type(nom.right())
		else: result_type = self.type_expr(stmt.returns)
		generics = [Nom(tp.name, self.at(tp)) for tp in getattr(stmt, "type_params", ())]
		decorators = [self.segment(d) for d in stmt.decorator_list]
		return Function(
			nom, parameters, result_type, self.definition(stmt),
			generics=generics, decorators=decorators, is_async=isinstance(stmt, ast.AsyncFunctionDef),
		)

	def parameter(self, arg:ast.arg, kind:ParamKind) -> Parameter:
		nom = Nom(arg.arg, self.at(arg))
		type_expr = None if arg.annotation is None else self.type_expr(arg.annotation)
		return Parameter(nom, type_expr, kind)

	def type_expr(self, annotation:ast.expr):
		excerpt = self.segment(annotation)
		return front_end.tokenize_type(excerpt.text, excerpt.start)

	def definition(self, stmt) -> Excerpt:
		""" A function's full text at module level, less any `@staticmethod` decoration. """
		first = min([stmt.lineno] + [d.lineno for d in stmt.decorator_list])
		skip = set()
		for d in stmt.decorator_list:
			if isinstance(d, ast.Name) and d.id == STATICMETHOD:
				skip.update(range(d.lineno, d.end_lineno+1))
		lines = [
			line for n, line in enumerate(self.index.lines(first, stmt.end_lineno), first)
			if n not in skip
		]
		return self.outdented(lines, first, stmt.end_lineno)

	def excerpt(self, stmt, group:ast.ClassDef) -> Excerpt:
		""" Any other member, as it would read at module level. """
		if self.shares_a_line(stmt, group):
			return self.segment(stmt)
		return self.outdented(self.index.lines(stmt.lineno, stmt.end_lineno), stmt.lineno, stmt.end_lineno)

	def shares_a_line(self, stmt, group:ast.ClassDef) -> bool:
		if stmt.lineno == group.lineno: return True
		for other in group.body:
			if other is stmt: continue
			if other.lineno <= stmt.end_lineno and stmt.lineno <= other.end_lineno: return True
		return False

	def outdented(self, lines:list[str], first:int, last:int) -> Excerpt:
		"""
		Remove the margin of the first line from every line that has it.
		Lines without it can only be the insides of multi-line strings,
		so they stay as they are.
		"""
		margin = re.match(r'[ \t]*', lines[0]).group()
		text = "".join(line[len(margin):] if line.startswith(margin) else line for line in lines)
		start = self.index.offset(first, 0)
		stop = self.index.offset(last + 1, 0) if last < len(self.index) else len(self.text)
		return Excerpt(text, start, stop)

	def body_indent(self, node:ast.ClassDef) -> str:
		for stmt in node.body:
			if stmt.lineno != node.lineno:
				margin = re.match(r'[ \t]*', self.index.line(stmt.lineno)).group()
				outer = re.match(r'[ \t]*', self.index.line(node.lineno)).group()
				if len(margin) > len(outer): return margin[len(outer):]
		return "\t"

def read_groups(text:str, path:Optional[Path]=None) -> list[Site]:
	"""
	Every group in the module, in source order.
	Raises a Defect for the first thing found that looks like a group but is not one.
	"""
	reader = Reader(text, path)
	return [reader.read(node) for node in reader.group_nodes()]

def transform_source(text:str, path:Optional[Path]=None, report:Optional[Report]=None) -> Optional[str]:
	"""
	Rewrite every group in the module. Each group succeeds or fails on its
	own, but a module with any failed group yields None rather than a
	partial rewrite; the report has one diagnostic per failed group.
	Python syntax errors in the module itself propagate as SyntaxError.
	"""
	if report is None: report = Report()
	report.attach_source(path, text)
	reader = Reader(text, path)
	replacements = []
	failed = False
	for node in reader.group_nodes():
		try:
			site = reader.read(node)
			report.info("Found group", site.group.nom.text, "at line", site.first_line)
			declarations = engine.defunctionalize_group(site.group, report)
		except Defect as ex:
			report.defect(path, ex)
			failed = True
		else:
			replacements.append((site, codegen.render(declarations, site.indent)))
	if failed: return None
	if not replacements: return text
	return _splice(reader.index, replacements)

def _splice(index:LineIndex, replacements) -> str:
	parts = []
	line_no = 1
	for n, (site, replacement) in enumerate(replacements):
		parts.extend(index.lines(line_no, site.first_line - 1))
		if n == 0: parts.append(codegen.PROLOGUE + "\n")
		parts.append(replacement)
		line_no = site.last_line + 1
	parts.extend(index.lines(line_no, len(index)))
	return "".join(parts)
