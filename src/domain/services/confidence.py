"""Domain service scoring how much a forecast can be trusted."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.domain.entities.orders import MonthlyObservation

DEFAULT_VARIANCE_SCALE = 10_000.0
IDEAL_OBSERVATION_COUNT = 12
MIN_CONFIDENCE = 10.0
MAX_CONFIDENCE = 95.0
MONTHLY_DECAY = 5.0


def sales_variance(observations: Sequence[MonthlyObservation]) -> float:
    """Population variance of monthly total sales."""
    if not observations:
        return 0.0
    return float(np.var([obs.total_sales for obs in observations]))


def score_confidence(
    r_squared: float,
    observation_count: int,
    variance: float,
    horizon_months: int,
    variance_scale: float = DEFAULT_VARIANCE_SCALE,
) -> float:
    """
    Combine fit quality, history length, variance and horizon into a score.

    Args:
        r_squared: Goodness of fit of the sales trend line
        observation_count: Number of monthly observations behind the fit
        variance: Variance of monthly sales, in squared currency units
        horizon_months: Number of months being forecast
        variance_scale: Variance at which the variance penalty saturates

    Returns:
        Confidence between 10 and 95
    """
    confidence = max(0.0, r_squared) * 100.0
    confidence *= min(1.0, observation_count / IDEAL_OBSERVATION_COUNT)
    confidence *= max(0.3, 1.0 - (horizon_months / 12.0) * 0.3)

    if variance > 0 and variance_scale > 0:
        confidence *= max(0.5, 1.0 - min(variance / variance_scale, 0.5))

    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence))


def decay_confidence(base_confidence: float, month_offset: int) -> float:
    """Confidence for the ``month_offset``-th future month (1-based)."""
    return max(MIN_CONFIDENCE, base_confidence - (month_offset - 1) * MONTHLY_DECAY)
