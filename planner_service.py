from __future__ import annotations
import logging
from typing import Iterable

from algorithms.errors import InvalidInput
from algorithms.math_tools import MathTools
from algorithms.program_tables import (
    FOUR_DAY_LAYOUT,
    MAIN_LIFT_TABLE,
    SECONDARY_LIFT_TABLE,
)
from models import TrainingMaxSet, WorkoutDayPlan, WorkoutSetPrescription

logger = logging.getLogger(__name__)


class PlannerService:
    """Expands training maxes into the fixed nSuns four day rotation."""

    @staticmethod
    def generate_sets(
        training_max: float, table: Iterable[tuple[int, float]]
    ) -> list[WorkoutSetPrescription]:
        """Return one prescription per table row, weights plate rounded."""
        if training_max < 0:
            raise InvalidInput("training max must be non-negative")
        return [
            WorkoutSetPrescription(
                set_number=idx,
                reps=reps,
                percentage=pct,
                weight=MathTools.round_weight(training_max * pct),
            )
            for idx, (reps, pct) in enumerate(table, start=1)
        ]

    @classmethod
    def build_four_day_program(cls, maxes: TrainingMaxSet) -> list[WorkoutDayPlan]:
        """Return bench, squat, ohp and deadlift days in that order."""
        days: list[WorkoutDayPlan] = []
        for day_type, main_ex, main_lift, second_ex, second_lift in FOUR_DAY_LAYOUT:
            days.append(
                WorkoutDayPlan(
                    day_type=day_type,
                    main_exercise=main_ex,
                    secondary_exercise=second_ex,
                    main_sets=cls.generate_sets(
                        maxes.for_lift(main_lift), MAIN_LIFT_TABLE
                    ),
                    secondary_sets=cls.generate_sets(
                        maxes.for_lift(second_lift), SECONDARY_LIFT_TABLE
                    ),
                )
            )
        logger.debug("Built %d day program from %s", len(days), maxes)
        return days
