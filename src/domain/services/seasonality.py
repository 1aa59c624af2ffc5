"""Domain service estimating per-calendar-month seasonal factors."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from src.domain.entities.forecast import NEUTRAL_SEASONAL_FACTOR, SeasonalProfile
from src.domain.entities.orders import MonthlyObservation


def compute_seasonality(observations: Sequence[MonthlyObservation]) -> SeasonalProfile:
    """Compare each calendar month's average sales with the overall average.

    Months without history, or a history whose overall average is not
    positive, get the neutral factor.
    """
    if not observations:
        return SeasonalProfile.neutral()

    overall_average = sum(obs.total_sales for obs in observations) / len(
        observations
    )

    samples: Dict[int, List[float]] = defaultdict(list)
    for obs in observations:
        samples[obs.month_index].append(obs.total_sales)

    factors: Dict[int, float] = {}
    for month_index in range(12):
        month_samples = samples.get(month_index)
        if month_samples and overall_average > 0:
            month_average = sum(month_samples) / len(month_samples)
            factors[month_index] = month_average / overall_average
        else:
            factors[month_index] = NEUTRAL_SEASONAL_FACTOR

    return SeasonalProfile(factors=factors)
