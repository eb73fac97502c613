"""
The signature parser: it reads the attribute argument which declares
the shared call interface of a group.

The grammar is deliberately loose about type-expressions. It keeps them
as opaque, balanced runs of tokens, because checking types is the host
compiler's job. Brackets of every sort nest, so a comma inside
`dict[str, int]` does not end a parameter.
"""
from typing import Iterator, Optional, Sequence

from boozetools.scanning.miniscan import Definition
from boozetools.scanning.engine import IterableScanner
from boozetools.scanning.interface import ScannerBlocked
from boozetools.parsing.miniparse import MiniParse
from boozetools.parsing.interface import SemanticError, ParseError, END_OF_TOKENS, ERROR_SYMBOL

from .ontology import Token, Nom
from .diagnostics import Defect, ErrorKind
from .syntax import (
	TypeExpr, Predicate, Parameter, GenericParam, CallSignature, Attribute, unit_type,
)

RESERVED = {"fn": "FN", "where": "WHERE"}
RECEIVER = "self"

##########################
#
#  Scanner
#

lexicon = Definition("Signature Lexicon")
lexicon.ignore(r'\s+')

def _token(yy: IterableScanner, kind:str):
	s = yy.slice()
	yy.token(kind, Token(kind, yy.match(), s.start, s.stop))

@lexicon.on(r'[A-Za-z_\u00AA-\U0010FFFF][A-Za-z_0-9\u00AA-\U0010FFFF]*', rank=1)
def scan_word(yy: IterableScanner):
	_token(yy, RESERVED.get(yy.match(), "name"))

@lexicon.on(r'\d+(\.\d+)?', rank=1)
def scan_number(yy: IterableScanner): _token(yy, "literal")

@lexicon.on(r'"[^"\n]*"', rank=1)
def scan_double_quoted(yy: IterableScanner): _token(yy, "literal")

@lexicon.on(r"'[^'\n]*'", rank=1)
def scan_single_quoted(yy: IterableScanner): _token(yy, "literal")

def scan_punctuation(yy: IterableScanner): _token(yy, yy.match())

for _pattern in (r'\(', r'\)', r'\[', r'\]', r'\{', r'\}', '<', '>', ',', ':', '->'):
	lexicon.on(_pattern, rank=1)(scan_punctuation)

@lexicon.on(r'::|\.\.\.', rank=1)
def scan_compound_operator(yy: IterableScanner): _token(yy, "op")

@lexicon.on(r'\S')
def scan_operator(yy: IterableScanner): _token(yy, "op")

def tokenize(text:str, offset:int=0) -> Iterator[tuple[str, Token]]:
	""" Yield (kind, token) pairs with offsets relative to the host text. """
	for kind, token in lexicon.scan(text):
		yield kind, token.shifted(offset)

def tokenize_type(text:str, offset:int=0) -> Optional[TypeExpr]:
	"""
	The host adapter reads annotations with this, so that types on either
	side of a comparison have passed through precisely the same scanner.
	"""
	tokens = [token for kind, token in tokenize(text, offset)]
	return TypeExpr(tokens) if tokens else None

##########################
#
#  Parser
#

class MissingName(SemanticError):
	""" The one semantic error we catch early enough to interrupt the parse. """
	def __init__(self, type_expr:TypeExpr):
		super().__init__(type_expr)
		self.type_expr = type_expr

class Unexpected(ParseError):
	def __init__(self, token:Optional[Token], expected:Sequence[str]):
		super().__init__(token, expected)
		self.token, self.expected = token, expected

class SignatureGrammar(MiniParse):
	""" MiniParse, but with parse errors that say what would have been acceptable. """

	def unexpected_token(self, kind, semantic, pds):
		raise Unexpected(semantic, self.expected_tokens(pds))

	def unexpected_eof(self, pds):
		raise Unexpected(None, self.expected_tokens(pds))

	def expected_tokens(self, pds) -> list[str]:
		hfa, combine = self.get_hfa_and_combine()
		return sorted(hfa.expected_terminals_at_state(pds.state))

grammar = SignatureGrammar("signature", method="LR1")

def _nothing(): return None
def _empty(): return ()
def _one(item): return (item,)
def _first(item): return [item]
def _more(some, another):
	some.append(another)
	return some
def _concat(some, more): return some + more
def _bracketed(opener, inner, closer): return (opener,) + inner + (closer,)

@grammar.rule("signature", ".FN .opt_name .opt_generics ( .params ) .opt_result .opt_where")
def _signature(head, name, generics, params, result, where):
	if result is None: result = unit_type(head.stop)
	return CallSignature(head, name, generics, params, result, where)

grammar.rule("opt_name", "")(_nothing)
@grammar.rule("opt_name", ".name")
def _name(token): return Nom.from_token(token)

grammar.rule("opt_generics", "")(_empty)
grammar.rule("opt_generics", "< .generic_list >")(tuple)
grammar.rule("opt_generics", "< .generic_list , >")(tuple)
grammar.rule("generic_list", ".generic")(_first)
grammar.rule("generic_list", ".generic_list , .generic")(_more)
@grammar.rule("generic", ".name")
def _unbounded(token): return GenericParam(Nom.from_token(token), None)
@grammar.rule("generic", ".name : .type_expr")
def _bounded(token, bounds): return GenericParam(Nom.from_token(token), TypeExpr(bounds))

grammar.rule("params", "")(_empty)
grammar.rule("params", ".param_list")(tuple)
grammar.rule("params", ".param_list ,")(tuple)
grammar.rule("param_list", ".param")(_first)
grammar.rule("param_list", ".param_list , .param")(_more)
@grammar.rule("param", ".name : .type_expr")
def _parameter(token, type_expr): return Parameter(Nom.from_token(token), TypeExpr(type_expr))
@grammar.rule("param", ".type_expr")
def _anonymous(type_expr): raise MissingName(TypeExpr(type_expr))

grammar.rule("opt_result", "")(_nothing)
@grammar.rule("opt_result", "-> .type_expr")
def _result(type_expr): return TypeExpr(type_expr)

grammar.rule("opt_where", "")(_empty)
grammar.rule("opt_where", "WHERE .predicates")(tuple)
grammar.rule("opt_where", "WHERE .predicates ,")(tuple)
grammar.rule("predicates", ".predicate")(_first)
grammar.rule("predicates", ".predicates , .predicate")(_more)
grammar.rule("predicate", ".pred_items")(Predicate)
grammar.rule("pred_items", ".pred_item")(None)
grammar.rule("pred_items", ".pred_items .pred_item")(_concat)
grammar.renaming("pred_item", "type_item")
grammar.rule("pred_item", ".:")(_one)

grammar.rule("type_expr", ".type_item")(None)
grammar.rule("type_expr", ".type_expr .type_item")(_concat)
for _kind in ("name", "literal", "op", "FN", "->"):
	grammar.rule("type_item", "."+_kind)(_one)
for _opener, _closer in ("()", "[]", "{}", "<>"):
	grammar.rule("type_item", ".%s .inner .%s" % (_opener, _closer))(_bracketed)

grammar.rule("inner", "")(_empty)
grammar.rule("inner", ".inner .inner_item")(_concat)
grammar.renaming("inner_item", "type_item")
for _kind in (",", ":", "WHERE"):
	grammar.rule("inner_item", "."+_kind)(_one)

##########################
#
#  The public face of it all
#

def parse_signature(attribute:Attribute) -> CallSignature:
	""" Parse the attribute argument or raise a Defect explaining why not. """
	text, offset = attribute
	try:
		signature = grammar.parse(tokenize(text, offset))
	except MissingName as ex:
		message = "Parameter of type `%s` needs a name, as in `name: %s`." % (ex.type_expr.text, ex.type_expr.text)
		raise Defect(ErrorKind.MissingParameterName, ex.type_expr, message) from None
	except Unexpected as ex:
		raise Defect(ErrorKind.SignatureSyntaxError, _blame(ex.token, attribute), _complaint(ex)) from None
	except ScannerBlocked as ex:
		blame = Token("op", text[ex.position:ex.position+1], offset+ex.position, offset+ex.position+1)
		raise Defect(ErrorKind.SignatureSyntaxError, _blame(blame, attribute), "Unrecognized character.") from None
	_check_parameter_names(signature)
	return signature

def _check_parameter_names(signature:CallSignature):
	seen = set()
	for param in signature.parameters:
		name = param.nom.text
		if name == RECEIVER:
			message = "`%s` is reserved for the union value itself; please choose another name." % RECEIVER
			raise Defect(ErrorKind.SignatureSyntaxError, param.nom, message)
		if name in seen:
			raise Defect(ErrorKind.SignatureSyntaxError, param.nom, "Parameter `%s` is named twice." % name)
		seen.add(name)

def _blame(token:Optional[Token], attribute:Attribute):
	if token is None:
		end = attribute.offset + len(attribute.text)
		return Nom("", end, end)
	return Nom.from_token(token)

def _complaint(ex:Unexpected) -> str:
	found = "the end of the signature" if ex.token is None else "`%s`" % ex.token.text
	expected = [_describe(k) for k in ex.expected if k not in (END_OF_TOKENS, ERROR_SYMBOL)]
	if END_OF_TOKENS in ex.expected: expected.append("the end")
	if not expected: return "This does not look like `fn(name: type, ...) -> type`; it stumbles at %s." % found
	return "Found %s where the signature needs %s." % (found, " or ".join(expected))

def _describe(kind:str) -> str:
	if kind in ("name", "literal"): return "a " + kind
	if kind in ("FN", "WHERE"): return "`%s`" % kind.lower()
	if kind == "op": return "an operator"
	return "`%s`" % kind
