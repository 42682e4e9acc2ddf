"""
Arbitrary boolean combination of masks, by a single merge-sweep.

Every set operation is the same algorithm with a different combining function.
The combiner receives a list of statuses, one per input mask, and answers the
status of the result at that point. The result's leading status is just the
combiner applied to all the leading statuses. After that, the only places the
answer can change are the breakpoints of the inputs, so I merge those in order,
visit each distinct value once (updating every input that breaks there before
consulting the combiner), and emit a breakpoint whenever the combined status flips.

The output comes out canonical by construction, but callers wrap it in a `Mask`,
which canonicalizes again. On already-sorted input that costs a linear pass.

The inputs are plain (leading, breakpoints) pairs rather than `Mask` objects.
That keeps this module free of any dependency on the value class.
"""
import heapq, itertools, operator
from .interfaces import Breakpoint, Combiner, Encoding

def sweep(combine:Combiner, encodings:list) -> Encoding:
	status = [bool(leading) for leading, _ in encodings]
	leading = current = bool(combine(status))
	streams = [[(value, i, flag) for value, flag in breakpoints] for i, (_, breakpoints) in enumerate(encodings)]
	merged = heapq.merge(*streams, key=operator.itemgetter(0))
	result = []
	for value, group in itertools.groupby(merged, key=operator.itemgetter(0)):
		for _, i, flag in group: status[i] = flag
		combined = bool(combine(status))
		if combined != current:
			result.append(Breakpoint(value, combined))
			current = combined
	return leading, tuple(result)

def key_points(encodings) -> list:
	""" The sorted distinct breakpoint values across all the given encodings. """
	merged = heapq.merge(*([value for value, _ in breakpoints] for _, breakpoints in encodings))
	return [value for value, _ in itertools.groupby(merged)]

def flipped(encoding:Encoding) -> Encoding:
	""" Complement never moves a breakpoint; it only inverts every status. """
	leading, breakpoints = encoding
	return not leading, tuple(Breakpoint(value, not status) for value, status in breakpoints)

# Combiners. Each takes the list of current statuses, in input order.
def any_of(status): return any(status)
def all_of(status): return all(status)
def first_but_none_of_the_rest(status): return status[0] and not any(status[1:])
def exactly_one_of_two(status): return operator.ne(*status)
