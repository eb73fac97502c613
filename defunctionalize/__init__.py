"""
Defunctionalization for Python: a group of functions sharing one call
signature becomes a union of plain data values plus a dispatch.
"""
from .runtime import DeFn, defunctionalize, NotTransformed
