"""
Everything interesting about a mask rests on its canonical encoding.

A mask is an indicator function over some totally-ordered domain, constant below its
smallest breakpoint and constant above its largest. I encode it as a leading status
(the answer for everything below the first breakpoint) and a sorted tuple of
(value, status) breakpoints. The canonical form is the minimal such tuple:

	Values strictly increase, so there are no duplicates.
	Each status differs from the one before it (the first from the leading status).

Canonical form is unique per indicator function, which is what lets equality be plain
structural comparison. Every constructor and every algebraic operation funnels its output
through `canonical(...)` so nothing escapes in a non-canonical state.

There is a second way to read a list of values: as successive toggles, starting from
excluded. It is handy for writing masks down by hand: [0, 10, 20] means included from 0, excluded from 10, and
included again from 20 onward. Repeated values toggle repeatedly, so a value appearing an
even number of times has no effect. Since toggles only make sense in order, a list that
goes backwards is an error rather than something to sort out quietly.

Note that only `<` is used to compare domain values here.
"""
import bisect, operator
from typing import Iterable
from .interfaces import Breakpoint, Encoding, NotNonDecreasing

def canonical(leading, breakpoints:Iterable) -> Encoding:
	"""
	Given a leading status and any old collection of (value, status) pairs,
	return the canonical encoding of the same indicator function.
	The pairs may be unsorted, repeated, or redundant. Among pairs with equal
	values, the last one supplied wins.
	"""
	leading = bool(leading)
	ordered = sorted(breakpoints, key=operator.itemgetter(0)) # Stable, so later pairs stay later.
	result, current = [], leading
	for i, (value, status) in enumerate(ordered):
		if i+1 < len(ordered) and not value < ordered[i+1][0]: continue # Superseded.
		status = bool(status)
		if status != current:
			result.append(Breakpoint(value, status))
			current = status
	return leading, tuple(result)

def first_falling_index(values) -> int:
	""" Return the index of the first value less than its predecessor, or zero if there is none. """
	for i in range(1, len(values)):
		if values[i] < values[i-1]: return i
	return 0

def toggled(points, leading=False) -> Encoding:
	"""
	Interpret a non-decreasing sequence of values as successive inclusion toggles,
	starting from the given leading status, and return the canonical encoding.
	"""
	points = list(points)
	falling = first_falling_index(points)
	if falling: raise NotNonDecreasing(falling, points)
	# Odd positions flip back. Last-writer-wins on duplicates then amounts to parity.
	return canonical(leading, ((p, (i % 2 == 0) != bool(leading)) for i, p in enumerate(points)))

def is_canonical(leading, breakpoints) -> bool:
	""" Does this pair already satisfy the invariants? Mainly of interest for testing. """
	current = leading
	for i, (value, status) in enumerate(breakpoints):
		if status == current: return False
		if i and not breakpoints[i-1][0] < value: return False
		current = status
	return True

def lookup(leading, breakpoints, values, point) -> bool:
	"""
	The status in effect at `point`. `values` must be the breakpoint values alone,
	in the same order, so that bisection can work on them directly.
	"""
	idx = bisect.bisect_right(values, point)
	return breakpoints[idx-1].status if idx else leading
