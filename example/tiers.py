"""========================================================================================================
This is a small demonstration of classifying values against rule sets with masks.

An online shop sorts orders into pricing tiers by their total, runs a promotion that is valid
during certain windows of time (minus a blackout for a holiday), and only grants the promotion
to orders in tiers that qualify. None of this requires listing individual totals or instants:
each rule is a mask, and the rules combine with ordinary set algebra.

Run it directly to see a few orders classified. Each line of stdin is an order total followed by
an ISO-format timestamp; with no input, a handful of canned orders are used.
"""
import datetime
from ordmask.mask import Mask, union, difference

TIERS = {
	'bronze': Mask.in_range(0, 100),
	'silver': Mask.in_range(100, 500),
	'gold': Mask.not_less_than(500),
}

def tier_of(total):
	for name, mask in TIERS.items():
		if mask.included(total): return name
	return None # Negative totals are refunds, which have no tier.

def day(y, m, d): return datetime.datetime(y, m, d)

PROMOTION_WINDOWS = union([
	Mask.in_range(day(2024, 11, 1), day(2024, 12, 1)),
	Mask.in_range(day(2024, 12, 15), day(2025, 1, 7)),
])
BLACKOUT = Mask.in_range(day(2024, 12, 25), day(2024, 12, 27))
PROMOTION = difference(PROMOTION_WINDOWS, [BLACKOUT])

# Bronze orders don't qualify.
QUALIFYING_TOTALS = TIERS['silver'] | TIERS['gold']

def promotion_applies(total, moment) -> bool:
	return QUALIFYING_TOTALS.included(total) and PROMOTION.included(moment)

CANNED = [
	(42, '2024-11-15T10:00'),
	(250, '2024-11-15T10:00'),
	(250, '2024-12-25T12:00'),
	(999, '2024-12-31T23:59'),
	(999, '2025-01-07T00:00'),
	(-5, '2024-11-15T10:00'),
]

def main():
	import sys
	print("Promotion is valid during:", PROMOTION)
	PROMOTION.display()
	orders = CANNED if sys.stdin.isatty() else [line.split() for line in sys.stdin if line.strip()]
	for total, stamp in orders:
		total, moment = float(total), datetime.datetime.fromisoformat(stamp)
		print("%10.2f  %s  %-6s  %s"%(total, moment, tier_of(total), 'promo' if promotion_applies(total, moment) else '-'))

if __name__ == '__main__': main()
