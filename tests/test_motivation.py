import math
import unittest

from sgpacalc.core.motivation import MOTIVATION_TIERS, select_motivation


class MotivationTests(unittest.TestCase):
    def test_tier_boundaries(self):
        cases = [
            (10, "Outstanding!"),
            (9.5, "Outstanding!"),
            (9.49999, "Great Job!"),
            (9.0, "Great Job!"),
            (8.99, "Very Good!"),
            (8.5, "Very Good!"),
            (8.49, "Good Work!"),
            (8.0, "Good Work!"),
            (7.99, "Fair Performance"),
            (7.0, "Fair Performance"),
            (6.99, "Needs Improvement"),
            (6.0, "Needs Improvement"),
            (5.99, "Don't Give Up"),
            (0, "Don't Give Up"),
        ]
        for sgpa, title in cases:
            with self.subTest(sgpa=sgpa):
                self.assertEqual(select_motivation(sgpa).title, title)

    def test_out_of_range_values(self):
        self.assertEqual(select_motivation(-3).title, "Don't Give Up")
        self.assertEqual(select_motivation(12.5).title, "Outstanding!")
        self.assertEqual(select_motivation(math.nan).title, "Don't Give Up")

    def test_seven_tiers_sorted_descending(self):
        self.assertEqual(len(MOTIVATION_TIERS), 7)
        thresholds = [tier.min_sgpa for tier in MOTIVATION_TIERS]
        self.assertEqual(thresholds, sorted(thresholds, reverse=True))

    def test_accents_are_distinct(self):
        accents = [tier.accent for tier in MOTIVATION_TIERS]
        self.assertEqual(len(set(accents)), len(accents))
        self.assertEqual(select_motivation(9.7).accent, "yellow")
        self.assertEqual(select_motivation(1).accent, "red")


if __name__ == "__main__":
    unittest.main()
