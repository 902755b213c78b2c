from __future__ import annotations
import datetime
import logging
from typing import Iterable, List, Optional, Dict

from algorithms.errors import InvalidResult
from algorithms.math_tools import MathTools
from algorithms.weight_converter import WeightConverter
from models import (
    AnalyticsSummary,
    BodyCompositionChange,
    BodyMetricSample,
    CompositionTrend,
    Correlation,
    PersonalRecordEvent,
    Trend,
)

logger = logging.getLogger(__name__)


class StatisticsService:
    """Relate logged body weight to personal records over time.

    All methods are pure functions of their arguments; inputs are never
    mutated and are re-sorted by date before use.
    """

    MATCH_TOLERANCE = datetime.timedelta(days=7)
    TREND_MIN_POINTS = 3
    TREND_WINDOW = 5
    TREND_THRESHOLD = 0.01
    COMPOSITION_THRESHOLD = 2.0

    @staticmethod
    def _closest_sample(
        target: datetime.datetime, samples: List[BodyMetricSample]
    ) -> Optional[BodyMetricSample]:
        closest = None
        smallest: Optional[datetime.timedelta] = None
        for sample in samples:
            diff = abs(sample.date - target)
            if diff > StatisticsService.MATCH_TOLERANCE:
                continue
            if smallest is None or diff < smallest:
                smallest = diff
                closest = sample
        return closest

    @classmethod
    def correlate(
        cls,
        samples: Iterable[BodyMetricSample],
        records: Iterable[PersonalRecordEvent],
    ) -> List[Correlation]:
        """Pair each record with the nearest body weight within a week."""
        sorted_samples = sorted(
            (s for s in samples if s.weight > 0), key=lambda s: s.date
        )
        sorted_records = sorted(records, key=lambda r: r.date)
        correlations: List[Correlation] = []
        for pr in sorted_records:
            match = cls._closest_sample(pr.date, sorted_samples)
            if match is None:
                logger.debug(
                    "No body weight within %s of %s on %s; skipping",
                    cls.MATCH_TOLERANCE,
                    pr.exercise_name,
                    pr.date.isoformat(),
                )
                continue
            correlations.append(
                Correlation(
                    date=pr.date,
                    body_weight=match.weight,
                    pr_weight=pr.weight_lifted,
                    estimated_max=pr.estimated_max,
                    strength_to_weight_ratio=pr.estimated_max / match.weight,
                )
            )
        return correlations

    @classmethod
    def trend(cls, correlations: List[Correlation]) -> Trend:
        """Classify the slope of the most recent strength-to-weight ratios."""
        if len(correlations) < cls.TREND_MIN_POINTS:
            return Trend.STABLE
        recent = sorted(correlations, key=lambda c: c.date)[-cls.TREND_WINDOW:]
        slope = MathTools.index_slope(c.strength_to_weight_ratio for c in recent)
        logger.debug("Ratio slope over %d points: %.5f", len(recent), slope)
        if slope > cls.TREND_THRESHOLD:
            return Trend.INCREASING
        if slope < -cls.TREND_THRESHOLD:
            return Trend.DECREASING
        return Trend.STABLE

    @staticmethod
    def _with_wilks(
        correlation: Correlation, is_male: bool, unit: str
    ) -> Correlation:
        body_kg = WeightConverter.to_kg(correlation.body_weight, unit)
        total_kg = WeightConverter.to_kg(correlation.estimated_max, unit)
        try:
            score = MathTools.wilks_score(body_kg, total_kg, is_male)
        except InvalidResult as e:
            logger.debug("Wilks score unavailable for %s: %s", correlation.date, e)
            return correlation
        return correlation.model_copy(update={"wilks_score": round(score, 2)})

    @classmethod
    def analyze(
        cls,
        samples: Iterable[BodyMetricSample],
        records: Iterable[PersonalRecordEvent],
        is_male: Optional[bool] = None,
        unit: str = "lb",
    ) -> AnalyticsSummary:
        """Return the full strength-to-weight summary for a lifter.

        When ``is_male`` is given each correlation also carries the Wilks
        score of its estimated max at the matched body weight.
        """
        correlations = cls.correlate(samples, records)
        if is_male is not None:
            correlations = [cls._with_wilks(c, is_male, unit) for c in correlations]
        if not correlations:
            return AnalyticsSummary()
        best = correlations[0]
        for corr in correlations[1:]:
            if corr.strength_to_weight_ratio > best.strength_to_weight_ratio:
                best = corr
        return AnalyticsSummary(
            correlations=correlations,
            average_ratio=MathTools.mean(
                c.strength_to_weight_ratio for c in correlations
            ),
            trend=cls.trend(correlations),
            best_ratio=best,
            current_ratio=correlations[-1],
        )

    @classmethod
    def body_composition(
        cls, samples: Iterable[BodyMetricSample]
    ) -> BodyCompositionChange:
        """Compare the first and last body measurements."""
        ordered = sorted(samples, key=lambda s: s.date)
        if len(ordered) < 2:
            return BodyCompositionChange()
        first, last = ordered[0], ordered[-1]
        weight_change = last.weight - first.weight
        fat_change = 0.0
        lean_change = 0.0
        if first.body_fat_pct and last.body_fat_pct:
            first_fat = first.weight * (first.body_fat_pct / 100)
            last_fat = last.weight * (last.body_fat_pct / 100)
            fat_change = last_fat - first_fat
            lean_change = (last.weight - last_fat) - (first.weight - first_fat)
        if weight_change > cls.COMPOSITION_THRESHOLD:
            trend = CompositionTrend.GAINING
        elif weight_change < -cls.COMPOSITION_THRESHOLD:
            trend = CompositionTrend.LOSING
        else:
            trend = CompositionTrend.MAINTAINING
        return BodyCompositionChange(
            weight_change=weight_change,
            fat_mass_change=fat_change,
            lean_mass_change=lean_change,
            trend=trend,
        )

    @staticmethod
    def ratio_series(summary: AnalyticsSummary) -> List[Dict[str, object]]:
        """Return chart points for the strength-to-weight history."""
        return [
            {
                "date": c.date.date().isoformat(),
                "ratio": round(c.strength_to_weight_ratio, 2),
                "body_weight": c.body_weight,
                "estimated_max": c.estimated_max,
            }
            for c in summary.correlations
        ]
