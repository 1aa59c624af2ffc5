"""
Domain Services Package

Pure functions implementing the sales forecasting model: monthly
aggregation, trend fitting, seasonality, confidence scoring and
projection.
"""

from .aggregation import aggregate_monthly, parse_order_timestamp
from .confidence import decay_confidence, sales_variance, score_confidence
from .forecast_engine import build_forecast
from .projection import project, shift_month
from .seasonality import compute_seasonality
from .trend import classify_trend, fit_line, fit_series

__all__ = [
    "aggregate_monthly",
    "parse_order_timestamp",
    "fit_line",
    "fit_series",
    "classify_trend",
    "compute_seasonality",
    "score_confidence",
    "decay_confidence",
    "sales_variance",
    "project",
    "shift_month",
    "build_forecast",
]
