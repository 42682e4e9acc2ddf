"""
This file aggregates the little record types and exception types which OrdMask deals in.

A mask is described by a leading status and a sequence of breakpoints. The breakpoint
record lives here rather than alongside the encoding logic so that everything else can
speak of it without dragging in the rest of the machinery.
"""

from typing import NamedTuple, Any, Callable, Sequence

class Breakpoint(NamedTuple):
	"""
	A domain value at which a mask's status changes, paired with the status
	in effect from that value onward (until the next breakpoint).
	"""
	value: Any
	status: bool

Statuses = Sequence[bool]
Combiner = Callable[[Statuses], bool]
Encoding = tuple[bool, tuple[Breakpoint, ...]]

class MaskError(ValueError):
	""" Base class of all exceptions arising from the mask machinery. """

class NotNonDecreasing(MaskError):
	"""
	Raised if a sequence of toggle points goes backwards somewhere.
	Parameters are:
		the index of the first value that is less than its predecessor.
		the offending sequence.
	"""
	def __init__(self, index, values):
		super().__init__(index, values)
		self.index, self.values = index, values

	def __str__(self):
		return "Toggle points must be non-decreasing, but the value at index %d is less than the value at index %d."%(self.index, self.index-1)
