"""
This rewrites Python modules: each class marked with
@defunctionalize("fn(...) -> ...") is a group of functions sharing
that signature, and it becomes a union of plain data values with
one variant per function, plus a dispatch to evaluate them.

{0}

For example:

    defunctionalize shapes.py -o shapes_out.py

will write the rewritten module to shapes_out.py if possible, or else try to explain why not.

    defunctionalize -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="defunctionalize",
	description="Defunctionalize the marked groups in a Python module.",
)
parser.add_argument("module", help="the Python module to rewrite.")
parser.add_argument('-o', "--output", help="write the rewritten module here instead of to standard output.")
parser.add_argument('-c', "--check", action="store_true", help="Check the groups but do not write anything.")
parser.add_argument('-v', "--verbose", action="count", help="Say what is going on, on standard error.")
parser.add_argument("--max-issues", type=int, default=30, help="Give up after this many problems.")

def run(args) -> int:
	from .diagnostics import Report, TooManyIssues
	from .host import transform_source
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	path = Path(args.module)
	try: text = path.read_text(encoding="utf-8")
	except OSError as ex:
		print("Cannot read %s: %s" % (path, ex.strerror), file=sys.stderr)
		return 1
	report.info("Reading", path)
	try:
		result = transform_source(text, path, report)
	except SyntaxError as ex:
		print("%s:%s: %s" % (path, ex.lineno, ex.msg), file=sys.stderr)
		return 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if result is None:
		assert report.sick()
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	elif args.output:
		Path(args.output).write_text(result, encoding="utf-8")
		report.info("Wrote", args.output)
	else:
		sys.stdout.write(result)
	return 0

def main(argv=None):
	if argv is None: argv = sys.argv[1:]
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		return 0
