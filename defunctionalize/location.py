"""
I want a simple way to turn the (line, column) pairs that Python's `ast`
hands out into the plain character offsets that every Phrase carries.
The concept is simple: remember where each line starts, and count.
"""
import re

_line = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")

class LineIndex:
	def __init__(self, text:str):
		self._lines = _line.findall(text)
		self._starts = [0]
		for line in self._lines:
			self._starts.append(self._starts[-1] + len(line))

	def offset(self, lineno:int, col_offset:int) -> int:
		"""
		Where `ast` says line `lineno` (from one) and UTF-8 byte column
		`col_offset`, return the character offset within the whole text.
		"""
		if lineno > len(self._lines): return self._starts[-1]
		line = self._lines[lineno-1]
		column = len(line.encode("utf-8")[:col_offset].decode("utf-8", errors="ignore"))
		return self._starts[lineno-1] + column

	def node_span(self, node) -> tuple[int, int]:
		return self.offset(node.lineno, node.col_offset), self.offset(node.end_lineno, node.end_col_offset)

	def line(self, lineno:int) -> str:
		return self._lines[lineno-1]

	def lines(self, first:int, last:int) -> list[str]:
		""" Lines `first` through `last` inclusive, counting from one, with their line-ends """
		return self._lines[first-1:last]

	def __len__(self): return len(self._lines)
