"""
The records the engine reads and writes.

The signature parser and the host adapter construct the first half of these.
The synthesis pass constructs the second half, and the code generator
walks over them to produce text. Class-level type annotations make peace
with the IDE wherever later passes add fields.
"""
from enum import Enum
from typing import NamedTuple, Optional, Sequence
from .ontology import Phrase, Nom, Token, Opaque, Excerpt

class TypeExpr(Opaque):
	pass

class Predicate(Opaque):
	""" One term of a where-clause, carried along verbatim. """

def unit_type(at:int) -> TypeExpr:
	""" What a signature or function returns when it does not say. """
	return TypeExpr([Token("name", "None", at, at)])

class ParamKind(Enum):
	POSITIONAL = "positional"
	VARIADIC = "variadic"
	KEYWORD = "keyword"
	VARIADIC_KEYWORD = "variadic_keyword"

class Parameter(Phrase):
	def __init__(self, nom:Nom, type_expr:Optional[TypeExpr], kind:ParamKind=ParamKind.POSITIONAL):
		self.nom = nom
		self.type_expr = type_expr
		self.kind = kind
	def left(self): return self.nom.left()
	def right(self): return (self.type_expr or self.nom).right()
	def __repr__(self): return "<:%s:%s>" % (self.nom.text, self.type_expr)

class GenericParam(Phrase):
	def __init__(self, nom:Nom, bounds:Optional[TypeExpr]):
		self.nom = nom
		self.bounds = bounds
	def left(self): return self.nom.left()
	def right(self): return (self.bounds or self.nom).right()
	def __repr__(self): return "<generic %s>" % self.nom.text

class CallSignature(Phrase):
	""" The shared call interface, as declared once in the attribute argument. """
	def __init__(
			self,
			head: Token,
			explicit_name: Optional[Nom],
			generic_params: Sequence[GenericParam],
			parameters: Sequence[Parameter],
			result_type: TypeExpr,
			where_clause: Sequence[Predicate],
	):
		self._head = head
		self.explicit_name = explicit_name
		self.generic_params = tuple(generic_params)
		self.parameters = tuple(parameters)
		self.result_type = result_type
		self.where_clause = tuple(where_clause)
	def left(self): return self._head.start
	def right(self):
		if self.where_clause: return self.where_clause[-1].right()
		return self.result_type.right()
	def arity(self) -> int: return len(self.parameters)
	def __repr__(self):
		p = ", ".join("%s: %s" % (p.nom.text, p.type_expr.text) for p in self.parameters)
		return "{fn(%s) -> %s}" % (p, self.result_type.text)

class Visibility(Enum):
	PUBLIC = "public"
	PRIVATE = "private"

class Declaration(Phrase):
	""" One member of a group. """
	excerpt: Excerpt
	def left(self): return self.excerpt.left()
	def right(self): return self.excerpt.right()

class Function(Declaration):
	def __init__(
			self,
			nom: Nom,
			parameters: Sequence[Parameter],
			result_type: TypeExpr,
			excerpt: Excerpt,
			*,
			generics: Sequence[Nom] = (),
			decorators: Sequence[Excerpt] = (),
			is_async: bool = False,
	):
		self.nom = nom
		self.parameters = tuple(parameters)
		self.result_type = result_type
		self.excerpt = excerpt
		self.generics = tuple(generics)
		self.decorators = tuple(decorators)
		self.is_async = is_async
	@property
	def visibility(self) -> Visibility:
		return Visibility.PRIVATE if self.nom.text.startswith("_") else Visibility.PUBLIC
	@property
	def body(self) -> str: return self.excerpt.text
	def __repr__(self):
		p = ", ".join(map(str, self.parameters))
		return "{fn|%s(%s)}" % (self.nom.text, p)

class Other(Declaration):
	def __init__(self, excerpt:Excerpt):
		self.excerpt = excerpt
	def __repr__(self): return "{other|%s}" % self.excerpt.text.splitlines()[0]

class Attribute(NamedTuple):
	""" The argument string handed to the engine, and where it begins in the host text. """
	text: str
	offset: int

class Group(Phrase):
	""" The annotated collection of declarations to defunctionalize. """
	def __init__(
			self,
			nom: Nom,
			attribute: Attribute,
			annotations: Sequence[Excerpt],
			members: Sequence[Declaration],
			doc: Optional[str] = None,
	):
		self.nom = nom
		self.attribute = attribute
		self.annotations = tuple(annotations)
		self.members = tuple(members)
		self.doc = doc
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()
	def __repr__(self): return "{group|%s}" % self.nom.text

##########################
#
#  From here down, the things the synthesis pass makes.
#

class ExtraField(NamedTuple):
	nom: Nom
	type_expr: TypeExpr

class Candidate(NamedTuple):
	function: Function
	extra_fields: tuple[ExtraField, ...]
	variant_name: str

class Variant(NamedTuple):
	name: str
	fields: tuple[ExtraField, ...]
	candidate: Candidate
	def is_unit(self) -> bool: return not self.fields

class UnionType(NamedTuple):
	name: str
	generic_params: tuple[GenericParam, ...]
	where_clause: tuple[Predicate, ...]
	annotations: tuple[Excerpt, ...]
	variants: tuple[Variant, ...]
	doc: Optional[str]
	def is_generic(self) -> bool: return bool(self.generic_params)

class Branch(NamedTuple):
	"""
	One arm of the dispatch: evaluate `function` with its parameters bound,
	in declaration order, to the variant's fields and then the call arguments.
	"""
	variant: Variant
	function: Function
	arguments: tuple[str, ...]
	def field_arguments(self) -> tuple[str, ...]: return self.arguments[:len(self.variant.fields)]
	def call_arguments(self) -> tuple[str, ...]: return self.arguments[len(self.variant.fields):]

class Dispatch(NamedTuple):
	union: UnionType
	signature: CallSignature
	branches: tuple[Branch, ...]
