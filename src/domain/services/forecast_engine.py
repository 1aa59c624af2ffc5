"""Domain service turning order history into a sales forecast."""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

import structlog

from src.domain.entities.forecast import (
    ForecastPeriod,
    MonthlyForecast,
    SalesForecast,
    TrendDirection,
)
from src.domain.entities.orders import MonthlyObservation, OrderRecord

from .aggregation import aggregate_monthly
from .confidence import DEFAULT_VARIANCE_SCALE, sales_variance, score_confidence
from .projection import project
from .seasonality import compute_seasonality
from .trend import classify_trend, fit_series

logger = structlog.get_logger(__name__)

MINIMUM_OBSERVATIONS = 3
HISTORY_WINDOW = 12
INSUFFICIENT_DATA_CONFIDENCE = 20


def _empty_forecast(
    period: ForecastPeriod,
    confidence: int,
    history: List[MonthlyObservation],
) -> SalesForecast:
    return SalesForecast(
        period_label=period.label,
        horizon_months=period.months,
        predicted_sales=0,
        predicted_orders=0,
        predicted_aov=0,
        confidence=confidence,
        trend=TrendDirection.STABLE,
        seasonality_average=1.0,
        historical_window=history,
        monthly_breakdown=[],
    )


def build_forecast(
    records: Sequence[OrderRecord],
    period: ForecastPeriod,
    anchor: date,
    *,
    variance_scale: float = DEFAULT_VARIANCE_SCALE,
    minimum_observations: int = MINIMUM_OBSERVATIONS,
    history_window: int = HISTORY_WINDOW,
) -> SalesForecast:
    """
    Build the forecast for ``period`` starting the month after ``anchor``.

    Without any order the forecast is all zeros with confidence 0. With
    fewer than ``minimum_observations`` months it is all zeros with
    confidence 20 and no breakdown. Totals and monthly sales are reported
    in whole currency units.
    """
    if not records:
        logger.info("forecast.no_orders", period=period.key)
        return _empty_forecast(period, confidence=0, history=[])

    observations = aggregate_monthly(records)
    if len(observations) < minimum_observations:
        logger.info(
            "forecast.insufficient_data",
            period=period.key,
            observations=len(observations),
            required=minimum_observations,
        )
        return _empty_forecast(
            period,
            confidence=INSUFFICIENT_DATA_CONFIDENCE,
            history=observations[-history_window:],
        )

    fits = fit_series(observations)
    seasonal = compute_seasonality(observations)
    trend = classify_trend(observations, fits.sales)
    confidence = score_confidence(
        r_squared=fits.sales.r_squared,
        observation_count=len(observations),
        variance=sales_variance(observations),
        horizon_months=period.months,
        variance_scale=variance_scale,
    )

    projection = project(
        fits=fits,
        seasonal=seasonal,
        anchor=anchor,
        horizon_months=period.months,
        base_confidence=confidence,
        observation_count=len(observations),
    )

    logger.info(
        "forecast.computed",
        period=period.key,
        observations=len(observations),
        trend=trend.value,
        sales_slope=fits.sales.slope,
        sales_r_squared=fits.sales.r_squared,
        confidence=confidence,
    )

    return SalesForecast(
        period_label=period.label,
        horizon_months=period.months,
        predicted_sales=round(projection.total_sales),
        predicted_orders=round(projection.total_orders),
        predicted_aov=round(projection.average_order_value),
        confidence=round(confidence),
        trend=trend,
        seasonality_average=seasonal.average(),
        historical_window=observations[-history_window:],
        monthly_breakdown=[
            MonthlyForecast(
                month_key=month.month_key,
                predicted_sales=round(month.predicted_sales),
                confidence=round(month.confidence),
            )
            for month in projection.breakdown
        ],
    )
