import unittest
import io
import contextlib
from ordmask.mask import Mask

PROBES = range(-5, 35)


def brute_force_included(mask, value):
	""" Straight from the definition: the status of the greatest breakpoint at or below the value. """
	status = mask.leading_status
	for bp in mask.breakpoints:
		if bp.value <= value: status = bp.status
	return status


class TestMembership(unittest.TestCase):
	def setUp(self):
		self.samples = [
			Mask.empty(),
			Mask.universal(),
			Mask.less_than(7),
			Mask.not_less_than(7),
			Mask.in_range(3, 12),
			Mask.from_sorted_toggle_points([0, 10, 20]),
			Mask.from_sorted_toggle_points([0, 10, 20], leading=True),
			Mask.from_sorted_toggle_points([1, 2, 4, 8, 16, 32]),
		]

	def check(self, mask, members, nonmembers):
		for x in members:
			with self.subTest(x=x): self.assertTrue(mask.included(x))
		for x in nonmembers:
			with self.subTest(x=x): self.assertFalse(mask.included(x))

	def test_00_boundary_example(self):
		mask = Mask.from_sorted_toggle_points([0, 10, 20])
		self.check(mask, [0, 2, 9, 20, 30, 10**9], [-1, -10**9, 10, 15, 19])
		assert mask.excluded(10)
		assert mask.excluded(15)

	def test_01_included_and_excluded_disagree(self):
		for mask in self.samples:
			for x in PROBES:
				with self.subTest(mask=mask, x=x):
					self.assertNotEqual(mask.included(x), mask.excluded(x))
					self.assertEqual(mask.included(x), x in mask)

	def test_02_at_and_around_every_breakpoint(self):
		for mask in self.samples:
			for value in mask.key_points():
				for x in (value - 1, value - 0.5, value, value + 0.5, value + 1):
					with self.subTest(mask=mask, x=x):
						self.assertEqual(brute_force_included(mask, x), mask.included(x))

	def test_03_empty_and_universal(self):
		self.check(Mask.empty(), [], PROBES)
		self.check(Mask.universal(), PROBES, [])
		assert Mask.empty().is_empty() and not Mask.empty().is_universal()
		assert Mask.universal().is_universal() and not Mask.universal().is_empty()
		for mask in self.samples[2:]:
			with self.subTest(mask=mask):
				assert not mask.is_empty()
				assert not mask.is_universal()

	def test_04_extremes(self):
		self.assertEqual((False, False), (Mask.empty().includes_min_value(), Mask.empty().includes_max_value()))
		self.assertEqual((True, True), (Mask.universal().includes_min_value(), Mask.universal().includes_max_value()))
		self.assertEqual((True, False), (Mask.less_than(0).includes_min_value(), Mask.less_than(0).includes_max_value()))
		self.assertEqual((False, True), (Mask.not_less_than(0).includes_min_value(), Mask.not_less_than(0).includes_max_value()))
		self.assertEqual((False, False), (Mask.in_range(0, 1).includes_min_value(), Mask.in_range(0, 1).includes_max_value()))


class TestViews(unittest.TestCase):
	def test_00_intervals(self):
		self.assertEqual([], Mask.empty().intervals())
		self.assertEqual([(None, None)], Mask.universal().intervals())
		self.assertEqual([(None, 5)], Mask.less_than(5).intervals())
		self.assertEqual([(5, None)], Mask.not_less_than(5).intervals())
		self.assertEqual([(0, 10), (20, None)], Mask.from_sorted_toggle_points([0, 10, 20]).intervals())
		self.assertEqual([(None, 0), (10, 20)], Mask.from_sorted_toggle_points([0, 10, 20], leading=True).intervals())

	def test_01_expand(self):
		upper = Mask.in_range(ord('A'), ord('Z') + 1)
		it = list(upper.expand([48, 64, 65, 66, 89, 90, 91, 92]))
		self.assertEqual([False, False, True, True, True, True, False, False], it)

	def test_02_expand_agrees_with_included(self):
		mask = Mask.from_sorted_toggle_points([1, 2, 4, 8, 16, 32], leading=True)
		probes = sorted([x / 2 for x in range(-4, 70)])
		self.assertEqual([mask.included(x) for x in probes], list(mask.expand(probes)))
		self.assertEqual([], list(mask.expand([])))

	def test_03_display(self):
		out = io.StringIO()
		with contextlib.redirect_stdout(out):
			Mask.from_sorted_toggle_points([0, 10, 20]).display()
		lines = out.getvalue().splitlines()
		self.assertEqual(5, len(lines))
		self.assertIn('10', lines[1])
		self.assertEqual(['✕', '✓', '✕', '✓'], [cell.strip() for cell in lines[3].split('│')])


if __name__ == '__main__':
	unittest.main()
