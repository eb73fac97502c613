from pathlib import Path
import sys
import unittest
from unittest import mock

from defunctionalize.diagnostics import Report, ErrorKind
from defunctionalize.host import transform_source

class Silence(Report):
	def __init__(self):
		super().__init__(verbose=False, max_issues=30)
		self.complain_to_console = mock.Mock()
	pass

base_folder = Path(__file__).parent.parent
zoo_fail = base_folder/"zoo/fail"

def _identify_problem(folder:Path, filename:str):
	specimen_path = folder / filename
	assert specimen_path.exists(), specimen_path
	report = Silence()
	result = transform_source(specimen_path.read_text(encoding="utf-8"), specimen_path, report)
	if result is None:
		assert 0 == report.complain_to_console.call_count
		assert 1 == len(report.diagnostics), report.diagnostics
		return report.diagnostics[0].kind
	else:
		return "failed to fail"

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def expect(self, kind:ErrorKind, cases):
		folder = kind.value.replace(" ", "_")
		for basename in cases:
			with self.subTest(basename):
				self.assertEqual(kind, _identify_problem(zoo_fail / folder, basename + ".py"))

	def test_00_signature(self):
		self.expect(ErrorKind.SignatureSyntaxError, [
			"named_twice",
			"not_a_fn",
			"self_parameter",
			"unclosed",
		])
		self.expect(ErrorKind.MissingParameterName, ["anonymous"])

	def test_01_group(self):
		self.expect(ErrorKind.MalformedGroup, [
			"no_signature",
			"not_a_string",
			"not_top_level",
			"with_base",
		])

	def test_02_candidates(self):
		self.expect(ErrorKind.AsyncCandidateUnsupported, ["coroutine"])
		self.expect(ErrorKind.ReceiverUnsupported, ["class_method", "self_receiver"])
		self.expect(ErrorKind.UnsupportedParameter, ["keyword_only", "keywords", "method_field", "star_args"])
		self.expect(ErrorKind.MissingTypeAnnotation, ["bare_parameter"])

	@unittest.skipIf(sys.version_info < (3, 12), "Type parameter syntax arrived in Python 3.12")
	def test_03_candidate_generics(self):
		self.expect(ErrorKind.CandidateGenericsUnsupported, ["own_type_parameter"])

	def test_04_signature_matching(self):
		self.expect(ErrorKind.ArityTooSmall, ["one_of_two"])
		self.expect(ErrorKind.TypeMismatch, ["suffix"])
		self.expect(ErrorKind.ReturnTypeMismatch, ["different", "unannotated"])

	def test_05_naming(self):
		self.expect(ErrorKind.DuplicateVariantName, ["cased_alike", "parameter_like_variant", "same_as_union"])

	def test_every_kind_has_a_folder(self):
		for kind in ErrorKind:
			with self.subTest(kind.name):
				self.assertTrue((zoo_fail / kind.value.replace(" ", "_")).is_dir())

	def test_diagnostics_render(self):
		report = Silence()
		path = zoo_fail / "type_mismatch" / "suffix.py"
		transform_source(path.read_text(encoding="utf-8"), path, report)
		text = report._issues[0].as_text()
		self.assertTrue(text.startswith("TypeMismatch: "))
		self.assertIn("suffix.py:7", text)


if __name__ == '__main__':
	unittest.main()
