"""
These most-fundamental classes are separate from the rest to avoid
various circular-import scenarios. Every record the engine can blame
for a problem is a Phrase, and a Phrase knows where it came from
in terms of absolute character offsets into the host module's text.
"""
from typing import NamedTuple

class Phrase:
	def left(self) -> int:
		""" Return the offset of the first character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the last character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> tuple[int, int]: return self.left(), self.right()

class Token(NamedTuple):
	""" One lexeme. Offsets are absolute within the host module. """
	kind: str
	text: str
	start: int
	stop: int

	def shifted(self, offset:int) -> "Token":
		return self._replace(start=self.start+offset, stop=self.stop+offset)

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, text:str, start:int=0, stop:int=None):
		assert isinstance(text, str)
		self.text = text
		self.start = start
		self.stop = start + len(text) if stop is None else stop
	@classmethod
	def from_token(cls, token:Token): return cls(token.text, token.start, token.stop)
	def __repr__(self): return "<Name %r>" % self.text
	def left(self): return self.start
	def right(self): return self.stop

class Excerpt(Phrase):
	""" A stretch of host text which the engine echoes but never interprets. """
	def __init__(self, text:str, start:int, stop:int):
		self.text, self.start, self.stop = text, start, stop
	def __repr__(self): return "<Excerpt %r>" % self.text
	def left(self): return self.start
	def right(self): return self.stop

class Opaque(Phrase):
	"""
	An opaque sequence of tokens: a type-expression, a generic bound,
	or a where-clause predicate. Two of these are equal exactly when
	their token texts agree, which amounts to textual equality
	after normalizing whitespace.
	"""
	tokens: tuple[Token, ...]
	def __init__(self, tokens):
		self.tokens = tuple(tokens)
		assert self.tokens, "Opaque phrases are never empty."
	def key(self) -> tuple[str, ...]: return tuple(t.text for t in self.tokens)
	def __eq__(self, other): return type(self) is type(other) and self.key() == other.key()
	def __hash__(self): return hash(self.key())
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self.text)
	def left(self): return self.tokens[0].start
	def right(self): return self.tokens[-1].stop
	@property
	def text(self) -> str:
		""" Echo the tokens, with a single space wherever the source had any. """
		parts = [self.tokens[0].text]
		for prior, token in zip(self.tokens, self.tokens[1:]):
			if token.start > prior.stop: parts.append(" ")
			parts.append(token.text)
		return "".join(parts)
