"""Domain entities describing a sales forecast."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Tuple

from .errors import InvalidForecastPeriodError
from .orders import MonthlyObservation

NEUTRAL_SEASONAL_FACTOR = 1.0


class TrendDirection(str, Enum):
    """Direction of the sales trend line."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True, slots=True)
class ForecastPeriod:
    """A named forecast horizon offered to the console."""

    key: str
    label: str
    months: int


FORECAST_PERIODS: Dict[str, ForecastPeriod] = {
    "1_month": ForecastPeriod(key="1_month", label="Next Month", months=1),
    "3_months": ForecastPeriod(key="3_months", label="Next 3 Months", months=3),
    "6_months": ForecastPeriod(key="6_months", label="Next 6 Months", months=6),
    "1_year": ForecastPeriod(key="1_year", label="Next Year", months=12),
}

DEFAULT_FORECAST_PERIOD = "3_months"


def resolve_forecast_period(key: str) -> ForecastPeriod:
    """Return the period registered under ``key``.

    Raises:
        InvalidForecastPeriodError: If the key is not a supported horizon.
    """
    period = FORECAST_PERIODS.get(key)
    if period is None:
        raise InvalidForecastPeriodError(
            key, details={"supported": sorted(FORECAST_PERIODS)}
        )
    return period


@dataclass(frozen=True, slots=True)
class RegressionFit:
    """Least-squares line fitted over an implicit 0..n-1 index."""

    slope: float
    intercept: float
    r_squared: float

    def value_at(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True, slots=True)
class SeriesFits:
    """Independent fits for the three monthly series."""

    sales: RegressionFit
    orders: RegressionFit
    average_order_value: RegressionFit


@dataclass(frozen=True)
class SeasonalProfile:
    """Multiplicative factor per calendar month (0 = January)."""

    factors: Mapping[int, float]

    def factor_for(self, month_index: int) -> float:
        return self.factors.get(month_index, NEUTRAL_SEASONAL_FACTOR)

    def average(self) -> float:
        values = [self.factor_for(index) for index in range(12)]
        return sum(values) / len(values)

    @classmethod
    def neutral(cls) -> "SeasonalProfile":
        return cls(factors={index: NEUTRAL_SEASONAL_FACTOR for index in range(12)})


@dataclass(frozen=True, slots=True)
class MonthlyForecast:
    """Projected sales for one future month."""

    month_key: str
    predicted_sales: float
    confidence: float


@dataclass(frozen=True, slots=True)
class ProjectionResult:
    """Totals and per-month breakdown produced by the projector."""

    total_sales: float
    total_orders: float
    average_order_value: float
    breakdown: Tuple[MonthlyForecast, ...] = ()


@dataclass(frozen=True)
class SalesForecast:
    """Forecast returned to the console for one request."""

    period_label: str
    horizon_months: int
    predicted_sales: float
    predicted_orders: float
    predicted_aov: float
    confidence: int
    trend: TrendDirection
    seasonality_average: float
    historical_window: List[MonthlyObservation] = field(default_factory=list)
    monthly_breakdown: List[MonthlyForecast] = field(default_factory=list)
