import unittest

from defunctionalize.diagnostics import Defect, ErrorKind
from defunctionalize.front_end import parse_signature, tokenize, tokenize_type
from defunctionalize.syntax import Attribute

def _parse(text, offset=0):
	return parse_signature(Attribute(text, offset))

class TokenizerTests(unittest.TestCase):

	def test_kinds(self):
		kinds = [k for k, t in tokenize("fn Foo<T>(x: T, y: 'a') -> T where T: Ord")]
		self.assertEqual([
			"FN", "name", "<", "name", ">", "(", "name", ":", "name", ",", "name", ":", "literal", ")",
			"->", "name", "WHERE", "name", ":", "name",
		], kinds)

	def test_offsets_are_shifted(self):
		tokens = [t for k, t in tokenize("fn(x: int)", 100)]
		self.assertEqual((100, 102), (tokens[0].start, tokens[0].stop))
		self.assertEqual("int", tokens[-2].text)
		self.assertEqual((106, 109), (tokens[-2].start, tokens[-2].stop))

	def test_compound_operators(self):
		self.assertEqual(["name", "op", "name", "op"], [k for k, t in tokenize("a::b ...")])

	def test_type_equality_ignores_whitespace(self):
		self.assertEqual(tokenize_type("dict[str,int]"), tokenize_type("dict[ str, int ]", 50))
		self.assertNotEqual(tokenize_type("List[int]"), tokenize_type("list[int]"))
		self.assertIsNone(tokenize_type("   "))

	def test_type_text_is_normalized(self):
		self.assertEqual("Callable[[int], str]", tokenize_type("Callable[[int],   str]").text)

	def test_names_need_not_be_ascii(self):
		tokens = list(tokenize("fn(größe: Maß) -> Maß"))
		self.assertEqual(["FN", "(", "name", ":", "name", ")", "->", "name"], [k for k, t in tokens])
		self.assertEqual("größe", tokens[2][1].text)


class SignatureTests(unittest.TestCase):

	def test_simple(self):
		sig = _parse("fn(x: int, y: int) -> int")
		self.assertIsNone(sig.explicit_name)
		self.assertEqual(2, sig.arity())
		self.assertEqual(["x", "y"], [p.nom.text for p in sig.parameters])
		self.assertEqual("int", sig.result_type.text)
		self.assertEqual((), sig.generic_params)
		self.assertEqual((), sig.where_clause)

	def test_empty_parameter_list(self):
		sig = _parse("fn() -> str")
		self.assertEqual(0, sig.arity())

	def test_result_defaults_to_none(self):
		sig = _parse("fn(message: str)")
		self.assertEqual("None", sig.result_type.text)
		self.assertEqual(tokenize_type("None"), sig.result_type)

	def test_explicit_name_and_generics(self):
		sig = _parse("fn Reducer<T, U: Sized,>(acc: T, item: U,) -> T where T: Add, U: Copy,")
		self.assertEqual("Reducer", sig.explicit_name.text)
		self.assertEqual(["T", "U"], [g.nom.text for g in sig.generic_params])
		self.assertIsNone(sig.generic_params[0].bounds)
		self.assertEqual("Sized", sig.generic_params[1].bounds.text)
		self.assertEqual(["T: Add", "U: Copy"], [p.text for p in sig.where_clause])

	def test_nested_brackets_keep_their_commas(self):
		sig = _parse("fn(table: dict[str, tuple[int, int]], f: Callable[[int], str]) -> (int, str)")
		self.assertEqual(["dict[str, tuple[int, int]]", "Callable[[int], str]"], [p.type_expr.text for p in sig.parameters])
		self.assertEqual("(int, str)", sig.result_type.text)

	def test_arrow_within_a_parameter_type(self):
		sig = _parse("fn(f: fn(int) -> int) -> int")
		self.assertEqual("fn(int) -> int", sig.parameters[0].type_expr.text)

	def test_locations_are_absolute(self):
		sig = _parse("fn(x: int)", 40)
		self.assertEqual((43, 44), sig.parameters[0].nom.span())
		self.assertEqual((46, 49), sig.parameters[0].type_expr.span())


class SignatureErrorTests(unittest.TestCase):

	def assertDefect(self, kind, text):
		with self.assertRaises(Defect) as cm:
			_parse(text)
		self.assertEqual(kind, cm.exception.kind)
		return cm.exception.diagnostic

	def test_syntax_errors(self):
		for text in [
			"",
			"(x: int) -> int",
			"fn(x: int",
			"fn(x: int) ->",
			"fn(x: int) -> int where",
			"fn(: int) -> int",
			"fn x: int",
			"fn<>(x: int)",
			"fn(x: dict[str, int) -> int",
		]:
			with self.subTest(text):
				self.assertDefect(ErrorKind.SignatureSyntaxError, text)

	def test_message_says_what_was_expected(self):
		d = self.assertDefect(ErrorKind.SignatureSyntaxError, "fn x: int")
		self.assertIn("`:`", d.message)
		self.assertIn("`(`", d.message)

	def test_end_of_text_is_blamed_at_the_end(self):
		d = self.assertDefect(ErrorKind.SignatureSyntaxError, "fn(x: int")
		self.assertEqual((9, 9), d.location.span())

	def test_missing_parameter_name(self):
		d = self.assertDefect(ErrorKind.MissingParameterName, "fn(int) -> int")
		self.assertEqual((3, 6), d.location.span())
		self.assertDefect(ErrorKind.MissingParameterName, "fn(x: int, list[int]) -> int")

	def test_parameter_named_twice(self):
		d = self.assertDefect(ErrorKind.SignatureSyntaxError, "fn(x: int, x: str)")
		self.assertEqual(11, d.location.left())

	def test_self_is_reserved(self):
		self.assertDefect(ErrorKind.SignatureSyntaxError, "fn(self: int) -> int")


if __name__ == '__main__':
	unittest.main()
