import sys, random
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Phrase

class ErrorKind(Enum):
	SignatureSyntaxError = "signature syntax"
	MissingParameterName = "missing parameter name"
	ArityTooSmall = "arity too small"
	TypeMismatch = "type mismatch"
	ReturnTypeMismatch = "return type mismatch"
	CandidateGenericsUnsupported = "candidate generics unsupported"
	DuplicateVariantName = "duplicate variant name"
	MalformedGroup = "malformed group"
	ReceiverUnsupported = "receiver unsupported"
	UnsupportedParameter = "unsupported parameter"
	MissingTypeAnnotation = "missing type annotation"
	AsyncCandidateUnsupported = "async candidate unsupported"

class Diagnostic(NamedTuple):
	kind: ErrorKind
	location: Phrase
	message: str

class Defect(Exception):
	"""
	Raised at the first fatal problem within a group.
	Nothing within the engine catches this: the host adapter files it
	with the report and emits nothing for the group in question.
	"""
	def __init__(self, kind:ErrorKind, location:Phrase, message:str):
		super().__init__(Diagnostic(kind, location, message))
	@property
	def diagnostic(self) -> Diagnostic: return self.args[0]
	@property
	def kind(self) -> ErrorKind: return self.diagnostic.kind
	def __str__(self): return "%s: %s" % (self.kind.value, self.diagnostic.message)

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]
	resignations = [
		'I cannot continue.',
		'The path before me fades into darkness.',
		'I need to ask for help.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the diagnostics of every group in every module handed to the tool. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=30):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._sources = {}
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	@property
	def diagnostics(self) -> list[Diagnostic]:
		return [pic.diagnostic for pic in self._issues]

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def attach_source(self, path:Optional[Path], text:str):
		""" Remember module text so that diagnostics can illustrate the offending code. """
		self._sources[path] = SourceText(text, filename=None if path is None else str(path))

	def defect(self, path:Optional[Path], ex:Defect):
		""" File the diagnostic carried by an exception from the engine. """
		self.issue(Pic(ex.diagnostic, self._sources.get(path)))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

class Pic:
	""" A diagnostic, plus whatever it takes to draw a picture of it. """
	def __init__(self, diagnostic:Diagnostic, source:Optional[SourceText]):
		self.diagnostic = diagnostic
		self._source = source

	def as_text(self):
		d = self.diagnostic
		lines = ["%s: %s" % (d.kind.name, d.message)]
		if self._source is not None:
			left, right = d.location.span()
			row, col = self._source.find_row_col(left)
			if self._source.filename:
				lines.append("%s:%d" % (self._source.filename, row))
			single_line = self._source.line_of_text(row)
			lines.append(illustration(single_line, col, right - left, prefix='% 6d |' % row, caption=""))
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
