import textwrap
import unittest
from unittest import mock

from defunctionalize import host
from defunctionalize.diagnostics import Defect, ErrorKind, Report
from defunctionalize.engine import defunctionalize_group
from defunctionalize.syntax import Other, Function, UnionType, Dispatch

def _group(source):
	return host.read_groups(textwrap.dedent(source))[0].group

SCENARIO_A = '''
	@defunctionalize("fn(x: int, y: int) -> int")
	class arithmetic:
		""" Ways to combine two numbers. """
		def add(x: int, y: int) -> int:
			return x + y
		def sub(x: int, y: int) -> int:
			return x - y
		def mult(x: int, y: int) -> int:
			return x * y
'''

SCENARIO_B = '''
	@defunctionalize("fn(rhs: int) -> int")
	class step:
		LIMIT = 10
		def sub(x: int, y: int) -> int:
			return x - y
		def _helper():
			pass
'''

class EngineTests(unittest.TestCase):

	def test_scenario_a(self):
		passthrough_and_more = defunctionalize_group(_group(SCENARIO_A))
		union, dispatch = passthrough_and_more
		self.assertIsInstance(union, UnionType)
		self.assertIsInstance(dispatch, Dispatch)
		self.assertEqual("Arithmetic", union.name)
		self.assertEqual("Ways to combine two numbers.", union.doc)
		self.assertEqual(["Add", "Sub", "Mult"], [v.name for v in union.variants])
		self.assertTrue(all(v.is_unit() for v in union.variants))
		self.assertEqual(3, len(dispatch.branches))
		self.assertEqual(("x", "y"), dispatch.branches[2].arguments)

	def test_scenario_b(self):
		emitted = defunctionalize_group(_group(SCENARIO_B))
		self.assertEqual([Other, Function, UnionType, Dispatch], [type(e) for e in emitted])
		union, dispatch = emitted[2], emitted[3]
		self.assertEqual(["x"], [f.nom.text for f in union.variants[0].fields])
		self.assertEqual("int", union.variants[0].fields[0].type_expr.text)
		branch = dispatch.branches[0]
		self.assertEqual(("self.x",), branch.field_arguments())
		self.assertEqual(("rhs",), branch.call_arguments())
		self.assertIs(union.variants[0].candidate.function, branch.function)

	def test_scenario_c_emits_nothing(self):
		with self.assertRaises(Defect) as cm:
			defunctionalize_group(_group('''
				@defunctionalize("fn(x: int, y: int) -> int")
				class arithmetic:
					def add(x: int, y: int) -> int:
						return x + y
					def negate(x: int) -> int:
						return -x
			'''))
		self.assertEqual(ErrorKind.ArityTooSmall, cm.exception.kind)

	def test_scenario_d(self):
		with self.assertRaises(Defect) as cm:
			defunctionalize_group(_group('''
				@defunctionalize("fn(n: int) -> int")
				class adders:
					def add_plus_n(k: int, n: int) -> int:
						return k + n
					def addPlusN(k: int, n: int) -> int:
						return n + k
			'''))
		self.assertEqual(ErrorKind.DuplicateVariantName, cm.exception.kind)

	def test_generics_where_and_annotations_are_forwarded(self):
		union, dispatch = defunctionalize_group(_group('''
			@first
			@defunctionalize("fn Folder<T: Number>(acc: T) -> T where T: Hash")
			@second(3)
			class folds:
				def ident(acc: T) -> T:
					return acc
		'''))
		self.assertEqual("Folder", union.name)
		self.assertTrue(union.is_generic())
		self.assertEqual("Number", union.generic_params[0].bounds.text)
		self.assertEqual(["T: Hash"], [p.text for p in union.where_clause])
		self.assertEqual(["first", "second(3)"], [a.text for a in union.annotations])

	def test_empty_group(self):
		union, dispatch = defunctionalize_group(_group('''
			@defunctionalize("fn() -> None")
			class nothing:
				pass
		'''))
		self.assertEqual((), union.variants)
		self.assertEqual((), dispatch.branches)

	def test_progress_goes_to_the_report(self):
		report = Report(verbose=1)
		with mock.patch.object(report, "info") as info:
			defunctionalize_group(_group(SCENARIO_A), report)
		self.assertTrue(info.called)


if __name__ == '__main__':
	unittest.main()
