"""Domain service fitting trend lines over monthly series."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.domain.entities.forecast import RegressionFit, SeriesFits, TrendDirection
from src.domain.entities.orders import MonthlyObservation

TREND_THRESHOLD_RATIO = 0.05


def fit_line(series: Sequence[float]) -> RegressionFit:
    """Fit an ordinary least-squares line against x = 0, 1, 2, ...

    Each value is one step apart whatever the calendar distance between
    the months it came from. Under-determined input yields a flat line
    through the mean with an R² of 0.
    """
    y = np.asarray(series, dtype=float)
    n = y.size
    if n == 0:
        return RegressionFit(slope=0.0, intercept=0.0, r_squared=0.0)

    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return RegressionFit(slope=0.0, intercept=float(sum_y / n), r_squared=0.0)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    residuals = y - (slope * x + intercept)
    ss_res = float((residuals**2).sum())
    ss_tot = float(((y - sum_y / n) ** 2).sum())
    if ss_tot == 0:
        r_squared = 1.0
    else:
        r_squared = min(1.0, max(0.0, 1.0 - ss_res / ss_tot))

    return RegressionFit(
        slope=float(slope), intercept=float(intercept), r_squared=r_squared
    )


def fit_series(observations: Sequence[MonthlyObservation]) -> SeriesFits:
    """Fit sales, order count and average order value independently."""
    return SeriesFits(
        sales=fit_line([obs.total_sales for obs in observations]),
        orders=fit_line([float(obs.order_count) for obs in observations]),
        average_order_value=fit_line(
            [obs.average_order_value for obs in observations]
        ),
    )


def classify_trend(
    observations: Sequence[MonthlyObservation], sales_fit: RegressionFit
) -> TrendDirection:
    """Classify the sales slope against 5% of the first month's sales."""
    first_sales = observations[0].total_sales if observations else 0.0
    threshold = abs(first_sales or 1.0) * TREND_THRESHOLD_RATIO

    if sales_fit.slope > threshold:
        return TrendDirection.INCREASING
    if sales_fit.slope < -threshold:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE
