"""Domain service walking the trend lines forward over the horizon."""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from src.domain.entities.forecast import (
    MonthlyForecast,
    ProjectionResult,
    SeasonalProfile,
    SeriesFits,
)

from .confidence import decay_confidence


def shift_month(anchor: date, months: int) -> Tuple[int, int]:
    """Return (year, month) of the calendar month ``months`` after ``anchor``."""
    index = anchor.year * 12 + (anchor.month - 1) + months
    return index // 12, index % 12 + 1


def project(
    fits: SeriesFits,
    seasonal: SeasonalProfile,
    anchor: date,
    horizon_months: int,
    base_confidence: float,
    observation_count: int,
) -> ProjectionResult:
    """
    Project sales and orders for each month after ``anchor``.

    The regression index continues where the history stopped, so the first
    future month sits at ``x = observation_count``. Negative projections are
    clamped to zero.
    """
    total_sales = 0.0
    total_orders = 0.0
    breakdown: List[MonthlyForecast] = []

    for offset in range(1, horizon_months + 1):
        year, month = shift_month(anchor, offset)
        x_index = observation_count + offset - 1
        factor = seasonal.factor_for(month - 1)

        sales = max(0.0, fits.sales.value_at(x_index) * factor)
        orders = max(0.0, fits.orders.value_at(x_index) * factor)

        breakdown.append(
            MonthlyForecast(
                month_key=f"{year:04d}-{month:02d}",
                predicted_sales=sales,
                confidence=decay_confidence(base_confidence, offset),
            )
        )
        total_sales += sales
        total_orders += orders

    return ProjectionResult(
        total_sales=total_sales,
        total_orders=total_orders,
        average_order_value=total_sales / total_orders if total_orders > 0 else 0.0,
        breakdown=tuple(breakdown),
    )
