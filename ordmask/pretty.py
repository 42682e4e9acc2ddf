""" Bits and bobs in support of visualizing masks. """

INCLUDED = '✓'
EXCLUDED = '✕'
INFINITY = '∞'
UNION = ' ∪ '
EMPTY_SET = '∅'

def mark(status) -> str: return INCLUDED if status else EXCLUDED

def breakpoint_grid(leading, breakpoints) -> list:
	""" Two rows: the breakpoint values, and the status from each one onward. The first column is everything below. """
	return [
		['...', *(value for value, _ in breakpoints)],
		[mark(leading), *(mark(status) for _, status in breakpoints)],
	]

def print_grid(grid):
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '─'
	vertical = ' │ '
	upper = horizontal + '┬' + horizontal
	inner = horizontal + '┼' + horizontal
	lower = horizontal + '┴' + horizontal
	segments = [horizontal*w for w in width]
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r: print(inner.join(segments))
		print(vertical.join(s.rjust(w,' ') for s,w in zip(row, width)))
	print(lower.join(segments))

def interval_notation(intervals) -> str:
	""" Render half-open (lo, hi) pairs, where None means unbounded, as a union of intervals. """
	def one(lo, hi):
		left = '(-'+INFINITY if lo is None else '[%r'%(lo,)
		right = INFINITY+')' if hi is None else '%r)'%(hi,)
		return left+', '+right
	return UNION.join(one(lo, hi) for lo, hi in intervals) or EMPTY_SET
