"""
Domain Entities Package

This package contains the core domain entities of the sales forecast.
"""

from .errors import DomainError, InvalidForecastPeriodError, OrderStoreError
from .forecast import (
    DEFAULT_FORECAST_PERIOD,
    FORECAST_PERIODS,
    ForecastPeriod,
    MonthlyForecast,
    ProjectionResult,
    RegressionFit,
    SalesForecast,
    SeasonalProfile,
    SeriesFits,
    TrendDirection,
    resolve_forecast_period,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .orders import MonthlyObservation, OrderRecord

__all__ = [
    "OrderRecord",
    "MonthlyObservation",
    "RegressionFit",
    "SeriesFits",
    "SeasonalProfile",
    "TrendDirection",
    "ForecastPeriod",
    "FORECAST_PERIODS",
    "DEFAULT_FORECAST_PERIOD",
    "resolve_forecast_period",
    "MonthlyForecast",
    "ProjectionResult",
    "SalesForecast",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "InvalidForecastPeriodError",
    "OrderStoreError",
]
