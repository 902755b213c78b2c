import os
import sys
import math
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import InvalidInput, InvalidResult, MathTools, WeightConverter


class MathToolsTestCase(unittest.TestCase):
    def test_one_rep_max_single_rep_unchanged(self) -> None:
        for weight in (45.0, 100.0, 137.5, 402.25):
            self.assertEqual(MathTools.one_rep_max(weight, 1), weight)

    def test_one_rep_max_epley(self) -> None:
        self.assertEqual(MathTools.one_rep_max(100, 10), 133)
        self.assertEqual(MathTools.one_rep_max(200, 3), 220)
        # 225 * (1 + 5/30) lands on 262.5 and rounds up
        self.assertEqual(MathTools.one_rep_max(225, 5), 263)

    def test_one_rep_max_invalid(self) -> None:
        with self.assertRaises(InvalidInput):
            MathTools.one_rep_max(0, 5)
        with self.assertRaises(InvalidInput):
            MathTools.one_rep_max(100, 0)
        with self.assertRaises(ValueError):
            MathTools.one_rep_max(-10, 3)

    def test_round_weight(self) -> None:
        self.assertEqual(MathTools.round_weight(203), 205)
        self.assertEqual(MathTools.round_weight(198), 197.5)
        self.assertEqual(MathTools.round_weight(201), 200)
        self.assertEqual(MathTools.round_weight(101.25), 102.5)
        self.assertEqual(MathTools.round_weight(202.5), 205)
        self.assertEqual(MathTools.round_weight(0), 0)
        with self.assertRaises(InvalidInput):
            MathTools.round_weight(-1)

    def test_round_weight_idempotent(self) -> None:
        x = 0.0
        while x <= 450:
            once = MathTools.round_weight(x)
            self.assertEqual(MathTools.round_weight(once), once)
            x += 0.7

    def test_wilks_score(self) -> None:
        c = MathTools.WILKS_MALE
        denom = sum(coef * 100.0**i for i, coef in enumerate(c))
        score = MathTools.wilks_score(100.0, 500.0, True)
        self.assertAlmostEqual(score, 500 * 500.0 / denom)
        self.assertAlmostEqual(score, 304.3, places=1)
        female = MathTools.wilks_score(60.0, 300.0, False)
        self.assertGreater(female, 0)

    def test_wilks_invalid(self) -> None:
        with self.assertRaises(InvalidResult):
            MathTools.wilks_score(10.0, 100.0, True)
        with self.assertRaises(InvalidInput):
            MathTools.wilks_score(0.0, 100.0, True)
        with self.assertRaises(InvalidInput):
            MathTools.wilks_score(80.0, -1.0, True)

    def test_mean_and_slope(self) -> None:
        self.assertEqual(MathTools.mean([]), 0.0)
        self.assertAlmostEqual(MathTools.mean([1.0, 2.0, 3.0]), 2.0)
        self.assertAlmostEqual(MathTools.index_slope([1.0, 1.5, 2.0, 2.5]), 0.5)
        self.assertAlmostEqual(MathTools.index_slope([3.0, 2.0, 1.0]), -1.0)
        self.assertEqual(MathTools.index_slope([4.0]), 0.0)
        self.assertFalse(math.isnan(MathTools.index_slope([2.0, 2.0, 2.0])))


class WeightConverterTestCase(unittest.TestCase):
    def test_conversions(self) -> None:
        self.assertEqual(WeightConverter.kg_to_lb(100), 220.46)
        self.assertEqual(WeightConverter.lb_to_kg(220.462), 100.0)
        self.assertEqual(WeightConverter.to_kg(80, "kg"), 80.0)
        self.assertEqual(WeightConverter.to_kg(220.462, "lb"), 100.0)
        with self.assertRaises(InvalidInput):
            WeightConverter.to_kg(80, "stone")


if __name__ == "__main__":
    unittest.main()
