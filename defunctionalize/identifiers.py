"""
How a group or function name becomes a type name.
"""
import re

_separators = re.compile(r'[\W_]+')

def pascal_case(name:str) -> str:
	"""
	Split on anything not alphanumeric, capitalize the first letter of
	each piece, and glue the pieces together. The rest of each piece is
	left alone, so `add_plus_n` and `addPlusN` both come out `AddPlusN`.
	A name with nothing alphanumeric in it comes back as it went in.
	"""
	pieces = [p[0].upper() + p[1:] for p in _separators.split(name) if p]
	return "".join(pieces) or name
