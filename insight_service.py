from __future__ import annotations
import logging
from typing import List

from algorithms.math_tools import MathTools
from models import AnalyticsSummary, Trend

logger = logging.getLogger(__name__)


class InsightService:
    """Turn an analytics summary into short observations for the lifter."""

    NEAR_BEST = 0.95
    BELOW_BEST = 0.85
    SUMMARY_MIN_POINTS = 10
    SUMMARY_WINDOW = 5

    NEAR_BEST_MSG = "You're at or near your best strength-to-weight ratio! Great work!"
    BELOW_BEST_MSG = (
        "Your strength-to-weight ratio has decreased. "
        "Consider adjusting your diet or training volume."
    )
    IMPROVING_MSG = "Your relative strength is improving over time. Keep up the good work!"
    DECLINING_MSG = (
        "Your relative strength is trending down. Review your recovery and nutrition."
    )

    @classmethod
    def generate(cls, summary: AnalyticsSummary, unit: str = "lbs") -> List[str]:
        insights: List[str] = []

        if summary.current_ratio is not None and summary.best_ratio is not None:
            current = summary.current_ratio.strength_to_weight_ratio
            best = summary.best_ratio.strength_to_weight_ratio
            if current >= best * cls.NEAR_BEST:
                insights.append(cls.NEAR_BEST_MSG)
            elif current < best * cls.BELOW_BEST:
                insights.append(cls.BELOW_BEST_MSG)

        if summary.trend == Trend.INCREASING:
            insights.append(cls.IMPROVING_MSG)
        elif summary.trend == Trend.DECREASING:
            insights.append(cls.DECLINING_MSG)

        if len(summary.correlations) > cls.SUMMARY_MIN_POINTS:
            recent = summary.correlations[-cls.SUMMARY_WINDOW:]
            avg_bw = MathTools.mean(c.body_weight for c in recent)
            avg_max = MathTools.mean(c.estimated_max for c in recent)
            insights.append(
                f"Recent average: {avg_bw:.1f} {unit} with {avg_max:.0f} {unit} estimated max"
            )

        logger.debug("Generated %d insights", len(insights))
        return insights
