import math
from typing import Iterable

import numpy as np

from .errors import InvalidInput, InvalidResult


class MathTools:
    """Provides essential mathematical utilities for strength calculations."""

    EPLEY_DIVISOR: float = 30.0
    ROUNDING_THRESHOLD: float = 200.0
    SMALL_INCREMENT: float = 2.5
    LARGE_INCREMENT: float = 5.0
    WILKS_MALE: tuple[float, ...] = (
        -216.0475144,
        16.2606339,
        -0.002388645,
        -0.00113732,
        7.01863e-6,
        -1.291e-8,
    )
    WILKS_FEMALE: tuple[float, ...] = (
        594.31747775582,
        -27.23842536447,
        0.82112226871,
        -0.00930733913,
        4.731582e-5,
        -9.054e-8,
    )

    @staticmethod
    def round_half_up(value: float) -> float:
        """Round ``value`` to the nearest integer, midpoints away from -inf."""
        return float(math.floor(round(value, 9) + 0.5))

    @classmethod
    def one_rep_max(cls, weight: float, reps: int) -> float:
        """Return the estimated one-rep max using the Epley formula.

        A single rep is returned unchanged. Anything else is extrapolated and
        rounded to the nearest whole unit.
        """
        if weight <= 0 or reps <= 0:
            raise InvalidInput("weight and reps must be positive")
        if reps == 1:
            return float(weight)
        return cls.round_half_up(weight * (1 + reps / cls.EPLEY_DIVISOR))

    @classmethod
    def wilks_polynomial(cls, body_weight_kg: float, is_male: bool = True) -> float:
        coeffs = cls.WILKS_MALE if is_male else cls.WILKS_FEMALE
        return float(np.polynomial.polynomial.polyval(body_weight_kg, coeffs))

    @classmethod
    def wilks_score(
        cls, body_weight_kg: float, total_kg: float, is_male: bool = True
    ) -> float:
        """Return the body weight normalised Wilks score for ``total_kg``."""
        if body_weight_kg <= 0:
            raise InvalidInput("body weight must be positive")
        if total_kg < 0:
            raise InvalidInput("total must be non-negative")
        denominator = cls.wilks_polynomial(body_weight_kg, is_male)
        if not math.isfinite(denominator) or denominator <= 0:
            raise InvalidResult(
                f"wilks denominator is {denominator} for body weight {body_weight_kg}"
            )
        score = 500 * total_kg / denominator
        if not math.isfinite(score) or score < 0:
            raise InvalidResult(f"wilks score {score} is not displayable")
        return score

    @classmethod
    def round_weight(cls, weight: float) -> float:
        """Round to the nearest 2.5 up to 200 and to the nearest 5 above it."""
        if not math.isfinite(weight) or weight < 0:
            raise InvalidInput("weight must be a non-negative number")
        increment = (
            cls.LARGE_INCREMENT if weight > cls.ROUNDING_THRESHOLD else cls.SMALL_INCREMENT
        )
        return cls.round_half_up(weight / increment) * increment

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        """Return the arithmetic mean of ``values`` or 0.0 when empty."""
        data = list(values)
        if not data:
            return 0.0
        return float(np.mean(np.array(data, dtype=float)))

    @staticmethod
    def index_slope(values: Iterable[float]) -> float:
        """Return the least squares slope of ``values`` against indices 1..n.

        Uses the closed form sums so no intercept is fitted explicitly.
        """
        y = np.array(list(values), dtype=float)
        n = len(y)
        if n < 2:
            return 0.0
        x = np.arange(1, n + 1, dtype=float)
        x_sum = x.sum()
        den = n * float(np.sum(x * x)) - x_sum * x_sum
        num = n * float(np.sum(x * y)) - x_sum * float(y.sum())
        return float(num / den)
