import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import InvalidInput, MAIN_LIFT_TABLE, SECONDARY_LIFT_TABLE
from models import TrainingMaxSet
from planner_service import PlannerService


class PlannerServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxes = TrainingMaxSet(
            bench=200, squat=300, deadlift=350, overhead_press=120
        )

    def test_main_sets(self) -> None:
        sets = PlannerService.generate_sets(300, MAIN_LIFT_TABLE)
        self.assertEqual(len(sets), 9)
        self.assertEqual(
            [s.percentage for s in sets],
            [0.75, 0.85, 0.95, 0.90, 0.85, 0.80, 0.75, 0.70, 0.65],
        )
        self.assertEqual([s.reps for s in sets], [8, 6, 4, 4, 4, 5, 6, 7, 8])
        self.assertEqual([s.set_number for s in sets], list(range(1, 10)))
        self.assertEqual(
            [s.weight for s in sets],
            [225, 255, 285, 270, 255, 240, 225, 210, 195],
        )

    def test_secondary_sets(self) -> None:
        sets = PlannerService.generate_sets(120, SECONDARY_LIFT_TABLE)
        self.assertEqual(len(sets), 8)
        self.assertEqual([s.reps for s in sets], [6, 5, 3, 5, 7, 4, 6, 8])
        self.assertEqual(
            [s.weight for s in sets], [60, 72.5, 85, 85, 85, 85, 85, 85]
        )

    def test_negative_max_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            PlannerService.generate_sets(-5, MAIN_LIFT_TABLE)

    def test_four_day_program(self) -> None:
        days = PlannerService.build_four_day_program(self.maxes)
        self.assertEqual(
            [d.day_type for d in days], ["bench", "squat", "ohp", "deadlift"]
        )
        for day in days:
            self.assertEqual(len(day.main_sets), 9)
            self.assertEqual(len(day.secondary_sets), 8)
        self.assertEqual(
            [(d.main_exercise, d.secondary_exercise) for d in days],
            [
                ("Bench Press", "Overhead Press"),
                ("Squat", "Sumo Deadlift"),
                ("Overhead Press", "Incline Bench Press"),
                ("Deadlift", "Front Squat"),
            ],
        )

    def test_program_uses_paired_maxes(self) -> None:
        bench, squat, ohp, dead = PlannerService.build_four_day_program(self.maxes)
        self.assertEqual(bench.main_sets[0].weight, 150)
        self.assertEqual(bench.secondary_sets[0].weight, 60)
        self.assertEqual(squat.main_sets[0].weight, 225)
        self.assertEqual(squat.secondary_sets[0].weight, 175)
        self.assertEqual(ohp.main_sets[0].weight, 90)
        self.assertEqual(ohp.secondary_sets[0].weight, 100)
        # 262.5 sits on a 5 lb midpoint and rounds up
        self.assertEqual(dead.main_sets[0].weight, 265)
        self.assertEqual(dead.secondary_sets[0].weight, 150)

    def test_weights_are_plate_multiples(self) -> None:
        for day in PlannerService.build_four_day_program(self.maxes):
            for s in day.main_sets + day.secondary_sets:
                step = 5 if s.weight > 200 else 2.5
                self.assertEqual(s.weight % step, 0)


if __name__ == "__main__":
    unittest.main()
