from __future__ import annotations
import logging

from algorithms.errors import InvalidInput
from models import ProgressionRecommendation

logger = logging.getLogger(__name__)


class ProgressionService:
    """Adjust training maxes from AMRAP set results."""

    # (reps over target, lower body increment, upper body increment)
    TRAINING_MAX_STEPS: tuple[tuple[int, float, float], ...] = (
        (2, 15.0, 10.0),
        (0, 10.0, 5.0),
    )

    # (reps over target, increment, message)
    RECOMMENDATION_STEPS: tuple[tuple[int, float, str], ...] = (
        (
            3,
            15.0,
            "Excellent! Increase training max by 15 lbs (lower) or 10 lbs (upper)",
        ),
        (
            1,
            10.0,
            "Good work! Increase training max by 10 lbs (lower) or 5 lbs (upper)",
        ),
        (
            0,
            5.0,
            "Met target. Increase training max by 5 lbs (lower) or 2.5 lbs (upper)",
        ),
    )
    HOLD_MESSAGE = "Keep working with current weights. Focus on form and recovery."

    @staticmethod
    def _check_reps(amrap_reps: int, target_reps: int) -> None:
        if amrap_reps < 0 or target_reps < 0:
            raise InvalidInput("rep counts must be non-negative")

    @classmethod
    def next_training_max(
        cls,
        current_max: float,
        amrap_reps: int,
        target_reps: int,
        is_lower_body: bool,
    ) -> float:
        """Return the training max to use for the next cycle."""
        cls._check_reps(amrap_reps, target_reps)
        for over, lower, upper in cls.TRAINING_MAX_STEPS:
            if amrap_reps >= target_reps + over:
                inc = lower if is_lower_body else upper
                logger.debug(
                    "AMRAP %d vs target %d: +%s", amrap_reps, target_reps, inc
                )
                return current_max + inc
        return current_max

    @classmethod
    def recommendation(
        cls, amrap_reps: int, target_reps: int
    ) -> ProgressionRecommendation:
        """Return a progression message for an AMRAP result.

        ``increment`` is the lower body figure quoted in the message; use
        :meth:`next_training_max` for the lift specific change.
        """
        cls._check_reps(amrap_reps, target_reps)
        for over, inc, message in cls.RECOMMENDATION_STEPS:
            if amrap_reps >= target_reps + over:
                return ProgressionRecommendation(
                    should_progress=True, message=message, increment=inc
                )
        return ProgressionRecommendation(
            should_progress=False, message=cls.HOLD_MESSAGE, increment=0.0
        )
