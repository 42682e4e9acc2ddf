"""
The `Mask` is an indicator function over some totally-ordered domain: integers, strings,
timestamps, whatever supports `<`. It answers "is this value included?" without ever
enumerating the included values, which makes it suitable for classifying things against
rule sets: pricing tiers, quota bands, validity windows, and so forth.

A mask is a finite union of disjoint half-open ranges. Internally it is the canonical
encoding described in `encoding.py`: a leading status (the answer below every breakpoint,
which is how a mask extends to minus-infinity without needing a minimum value) and a sorted
tuple of breakpoints where the answer flips. Because the encoding is canonical, two masks
are equal exactly when they include the same values.

Masks are immutable. Every constructor and every operation builds a new one, and every new
one passes through `encoding.canonical(...)` on the way in; there is no back door.

Two major categories of operation exist for these things.

	The first is construction: from explicit toggle points, from a map of breakpoint
	to status, from a set of keys and a predicate, or from the convenience range
	constructors.

	The second is logical combination of masks to produce another. These are given both
	as functions over any number of masks (`union`, `intersection`, `difference`) and as
	the operators `|`, `&`, `-`, `^`, `~` for the two-operand case. The operators delegate
	to the functions, so the two always agree.

A quick example:

	>>> weekday_hours = Mask.in_range(9, 17)
	>>> lunch = Mask.in_range(12, 13)
	>>> str(weekday_hours - lunch)
	'[9, 12) ∪ [13, 17)'
"""

from typing import Iterable, Mapping, Callable
from . import algebra, encoding, pretty

class Mask:
	__slots__ = ('_leading', '_breakpoints', '_values')

	def __init__(self, leading_status=False, breakpoints:Iterable=()):
		"""
		Any iterable of (value, status) pairs will do: unsorted, duplicated, or redundant.
		Among pairs with equal values, the last one wins.
		"""
		self._leading, self._breakpoints = encoding.canonical(leading_status, breakpoints)
		self._values = tuple(bp.value for bp in self._breakpoints)

	# Construction:

	@classmethod
	def empty(cls) -> "Mask": return cls(False)

	@classmethod
	def universal(cls) -> "Mask": return cls(True)

	@classmethod
	def less_than(cls, value) -> "Mask": return cls(True, [(value, False)])

	@classmethod
	def not_less_than(cls, value) -> "Mask": return cls(False, [(value, True)])

	@classmethod
	def in_range(cls, start, end) -> "Mask":
		""" Includes [start, end). A backwards or empty range makes an empty mask. """
		if start < end: return cls(False, [(start, True), (end, False)])
		return cls.empty()

	@classmethod
	def exclude_range(cls, start, end) -> "Mask":
		""" Includes everything except [start, end). A backwards or empty range excludes nothing. """
		if start < end: return cls(True, [(start, False), (end, True)])
		return cls.universal()

	@classmethod
	def from_sorted_toggle_points(cls, points:Iterable, leading=False) -> "Mask":
		"""
		Each point toggles inclusion, starting from `leading`. So with the default,
		[0, 10, 20] includes [0, 10) and everything from 20 on.
		Raises NotNonDecreasing if the points ever go backwards.
		"""
		return cls(*encoding.toggled(points, leading))

	@classmethod
	def from_key_points_map(cls, mapping:Mapping, default_leading_status=False) -> "Mask":
		"""
		The mapping says, for each key point, whether values from there onward are included.
		For example, a mask like this:

		| ✕ | ✕ | ✓ | ✓ | ✓ | ✕ | ✕ |
		|...| 0 | 1 | 2 | 3 | 4 |...|

		comes from {1: True, 4: False} with a default leading status of False.
		"""
		return cls(default_leading_status, mapping.items())

	@classmethod
	def from_key_points_set(cls, keys:Iterable, predicate:Callable, default_leading_status=False) -> "Mask":
		"""
		The predicate is consulted only at the key points themselves, in ascending order.
		It is up to the caller to choose keys that capture every change of status.
		The leading status comes from the parameter, never from the predicate.
		"""
		return cls(default_leading_status, [(key, predicate(key)) for key in sorted(keys)])

	# Inspection:

	@property
	def leading_status(self) -> bool: return self._leading

	@property
	def breakpoints(self) -> tuple: return self._breakpoints

	def key_points(self) -> tuple: return self._values

	def is_empty(self) -> bool: return not (self._leading or self._breakpoints)
	def is_universal(self) -> bool: return self._leading and not self._breakpoints
	def includes_min_value(self) -> bool: return self._leading
	def includes_max_value(self) -> bool: return self._breakpoints[-1].status if self._breakpoints else self._leading

	def included(self, value) -> bool: return encoding.lookup(self._leading, self._breakpoints, self._values, value)
	def excluded(self, value) -> bool: return not self.included(value)
	def __contains__(self, value): return self.included(value)

	def expand(self, points):
		""" Given a sorted sequence of values, yield a stream of booleans indicating whether each is included. """
		# Calling 'included(...)' in a loop would be O(N*log(M)); this is O(N+M).
		idx, status, size = 0, self._leading, len(self._values)
		for x in points:
			while idx < size and not x < self._values[idx]:
				status = self._breakpoints[idx].status
				idx += 1
			yield status

	def intervals(self) -> list:
		""" The included ranges as half-open (lo, hi) pairs. None stands for an unbounded end. """
		result, start = [], None
		for value, status in self._breakpoints:
			if status: start = value
			else: result.append((start, value))
		if self.includes_max_value(): result.append((start, None))
		return result

	def display(self): pretty.print_grid(pretty.breakpoint_grid(self._leading, self._breakpoints))

	# Combination:

	def complement(self) -> "Mask": return complement(self)
	def minus(self, *others:"Mask") -> "Mask": return difference(self, others)
	def symmetric_difference(self, other:"Mask") -> "Mask": return symmetric_difference(self, other)

	def __or__(self, other):
		if not isinstance(other, Mask): return NotImplemented
		return union([self, other])

	def __and__(self, other):
		if not isinstance(other, Mask): return NotImplemented
		return intersection([self, other])

	def __sub__(self, other):
		if not isinstance(other, Mask): return NotImplemented
		return difference(self, [other])

	def __xor__(self, other):
		if not isinstance(other, Mask): return NotImplemented
		return symmetric_difference(self, other)

	def __invert__(self): return complement(self)

	# Value semantics:

	def as_encoding(self): return self._leading, self._breakpoints

	def __eq__(self, other):
		if not isinstance(other, Mask): return NotImplemented
		return self._leading == other._leading and self._breakpoints == other._breakpoints

	def __hash__(self): return hash((self._leading, self._breakpoints))

	def __repr__(self):
		return "Mask(%r, %r)"%(self._leading, tuple(tuple(bp) for bp in self._breakpoints))

	def __str__(self):
		return pretty.interval_notation(self.intervals())


def union(masks:Iterable[Mask]) -> Mask:
	""" Included in at least one of the masks. The union of nothing is empty. """
	return Mask(*algebra.sweep(algebra.any_of, [m.as_encoding() for m in masks]))

def intersection(masks:Iterable[Mask]) -> Mask:
	""" Included in every one of the masks. The intersection of nothing is universal. """
	return Mask(*algebra.sweep(algebra.all_of, [m.as_encoding() for m in masks]))

def difference(mask:Mask, subtrahends:Iterable[Mask]) -> Mask:
	""" Included in `mask` and excluded from all of the subtrahends. """
	encodings = [mask.as_encoding(), *(m.as_encoding() for m in subtrahends)]
	return Mask(*algebra.sweep(algebra.first_but_none_of_the_rest, encodings))

def symmetric_difference(a:Mask, b:Mask) -> Mask:
	""" Included in one or the other, but not both. """
	return Mask(*algebra.sweep(algebra.exactly_one_of_two, [a.as_encoding(), b.as_encoding()]))

def complement(mask:Mask) -> Mask:
	return Mask(*algebra.flipped(mask.as_encoding()))

def key_points_of(masks:Iterable[Mask]) -> list:
	""" All the distinct breakpoint values among the masks, in order. """
	return algebra.key_points([m.as_encoding() for m in masks])
