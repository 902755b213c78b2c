from __future__ import annotations
import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from algorithms.math_tools import MathTools


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class CompositionTrend(str, Enum):
    GAINING = "gaining"
    LOSING = "losing"
    MAINTAINING = "maintaining"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class BodyMetricSample(FrozenModel):
    """A single body measurement entry."""

    date: datetime.datetime
    weight: float
    body_fat_pct: Optional[float] = None
    muscle_mass: Optional[float] = None
    waist: Optional[float] = None
    chest: Optional[float] = None
    arms: Optional[float] = None
    legs: Optional[float] = None


class PersonalRecordEvent(FrozenModel):
    """A personal record with its estimated one-rep max."""

    date: datetime.datetime
    exercise_name: str
    weight_lifted: float
    reps: int
    estimated_max: float

    @classmethod
    def from_set(
        cls,
        date: datetime.datetime,
        exercise_name: str,
        weight_lifted: float,
        reps: int,
    ) -> "PersonalRecordEvent":
        """Create a record whose ``estimated_max`` is the Epley estimate."""
        return cls(
            date=date,
            exercise_name=exercise_name,
            weight_lifted=weight_lifted,
            reps=reps,
            estimated_max=MathTools.one_rep_max(weight_lifted, reps),
        )


class Correlation(FrozenModel):
    date: datetime.datetime
    body_weight: float
    pr_weight: float
    estimated_max: float
    strength_to_weight_ratio: float
    wilks_score: Optional[float] = None


class AnalyticsSummary(FrozenModel):
    correlations: list[Correlation] = Field(default_factory=list)
    average_ratio: float = 0.0
    trend: Trend = Trend.STABLE
    best_ratio: Optional[Correlation] = None
    current_ratio: Optional[Correlation] = None


class BodyCompositionChange(FrozenModel):
    weight_change: float = 0.0
    fat_mass_change: float = 0.0
    lean_mass_change: float = 0.0
    trend: CompositionTrend = CompositionTrend.MAINTAINING


class TrainingMaxSet(FrozenModel):
    bench: float
    squat: float
    deadlift: float
    overhead_press: float

    def for_lift(self, lift: str) -> float:
        return float(getattr(self, lift))


class WorkoutSetPrescription(FrozenModel):
    set_number: int
    reps: int
    percentage: float
    weight: float


class WorkoutDayPlan(FrozenModel):
    day_type: str
    main_exercise: str
    secondary_exercise: str
    main_sets: list[WorkoutSetPrescription]
    secondary_sets: list[WorkoutSetPrescription]


class ProgressionRecommendation(FrozenModel):
    should_progress: bool
    message: str
    increment: float
