"""
The little bit that generated code relies upon at run time.
"""

class NotTransformed(Exception):
	"""
	A group was executed as ordinary Python, which means nobody ran
	it through the transformation first.
	"""

class DeFn:
	"""
	Base of every generated union. A value of the union stands for one of
	the functions in its group, together with whatever extra arguments
	that function needed beyond the shared signature.
	"""
	__slots__ = ()

	def call(self, *args):
		raise NotImplementedError(type(self))

	def apply(self, args:tuple):
		""" Like `call`, but with the shared arguments as one tuple. """
		return type(self).call(self, *args)

	def __call__(self, *args):
		return type(self).call(self, *args)

def defunctionalize(signature:str):
	""" Marks a group for the transformation. It does nothing on its own. """
	def decorate(cls):
		raise NotTransformed("Group %r must be run through the defunctionalize tool before use; its signature is %r." % (cls.__name__, signature))
	return decorate
