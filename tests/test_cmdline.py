import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from defunctionalize import cmdline

base_folder = Path(__file__).parent.parent
zoo = base_folder/"zoo"

def _run(*argv):
	out, err = io.StringIO(), io.StringIO()
	with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
		status = cmdline.main(list(argv))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):

	def test_writes_to_standard_output(self):
		status, out, err = _run(str(zoo/"ok/arithmetic.py"))
		self.assertEqual(0, status)
		self.assertIn("class Arithmetic(_DeFn):", out)
		self.assertIn("def _Arithmetic_mult(x: int, y: int) -> int:", out)
		self.assertEqual("", err)

	def test_writes_to_a_file(self):
		with tempfile.TemporaryDirectory() as folder:
			target = Path(folder)/"out.py"
			status, out, err = _run(str(zoo/"ok/partial.py"), "-o", str(target))
			self.assertEqual(0, status)
			self.assertEqual("", out)
			self.assertIn("class Sub(Step):", target.read_text(encoding="utf-8"))

	def test_check_only(self):
		status, out, err = _run(str(zoo/"ok/generic.py"), "--check")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("Looks plausible to me.", err)

	def test_failure_writes_nothing(self):
		with tempfile.TemporaryDirectory() as folder:
			target = Path(folder)/"out.py"
			status, out, err = _run(str(zoo/"fail/arity_too_small/one_of_two.py"), "-o", str(target))
			self.assertEqual(1, status)
			self.assertFalse(target.exists())
			self.assertIn("ArityTooSmall", err)
			self.assertIn("one_of_two.py:7", err)

	def test_verbose(self):
		status, out, err = _run(str(zoo/"ok/arithmetic.py"), "-c", "-v")
		self.assertEqual(0, status)
		self.assertIn("Found group arithmetic", err)

	def test_too_many_issues(self):
		with tempfile.TemporaryDirectory() as folder:
			source = Path(folder)/"many.py"
			source.write_text("".join(
				'@defunctionalize("fn(x)")\nclass g%d:\n\tpass\n\n' % i for i in range(5)
			), encoding="utf-8")
			status, out, err = _run(str(source), "--max-issues", "2")
		self.assertEqual(1, status)
		self.assertIn("Giving up", err)

	def test_missing_file(self):
		status, out, err = _run("no/such/module.py")
		self.assertEqual(1, status)
		self.assertIn("Cannot read", err)

	def test_python_syntax_error(self):
		with tempfile.TemporaryDirectory() as folder:
			source = Path(folder)/"broken.py"
			source.write_text("def (:\n", encoding="utf-8")
			status, out, err = _run(str(source))
		self.assertEqual(1, status)
		self.assertIn("broken.py:1", err)

	def test_no_arguments_prints_help(self):
		status, out, err = _run()
		self.assertEqual(0, status)
		self.assertIn("usage: defunctionalize", out)


if __name__ == '__main__':
	unittest.main()
