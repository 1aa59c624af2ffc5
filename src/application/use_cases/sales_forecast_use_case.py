"""
Application Use Case - Sales Forecast

Produces the sales forecast shown on the analytics page. The use case:
  * Validates the requested forecast period
  * Reads the completed orders of the look-back window from the order store
  * Runs the forecasting model over them
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from src.application.dtos.forecast_dto import SalesForecastDTO
from src.domain.entities.errors import InvalidForecastPeriodError, OrderStoreError
from src.domain.entities.forecast import (
    DEFAULT_FORECAST_PERIOD,
    resolve_forecast_period,
)
from src.domain.gateways.order_store_gateway import IOrderStoreGateway
from src.domain.services.confidence import DEFAULT_VARIANCE_SCALE
from src.domain.services.forecast_engine import (
    HISTORY_WINDOW,
    MINIMUM_OBSERVATIONS,
    build_forecast,
)

logger = structlog.get_logger(__name__)


class SalesForecastError(Exception):
    """Base exception for forecast failures."""

    pass


class SalesForecastValidationError(SalesForecastError):
    """Raised when the forecast request is invalid."""

    pass


class SalesForecastDependencyError(SalesForecastError):
    """Raised when the order store cannot provide the order history."""

    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerateSalesForecastUseCase:
    """Coordinates the sales forecast for one request."""

    def __init__(
        self,
        order_store_gateway: IOrderStoreGateway,
        lookback_years: int = 2,
        excluded_status: str = "Cancelled",
        variance_scale: float = DEFAULT_VARIANCE_SCALE,
        minimum_observations: int = MINIMUM_OBSERVATIONS,
        history_window: int = HISTORY_WINDOW,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.order_store_gateway = order_store_gateway
        self.lookback_years = lookback_years
        self.excluded_status = excluded_status
        self.variance_scale = variance_scale
        self.minimum_observations = minimum_observations
        self.history_window = history_window
        self._clock = clock or _utcnow

    async def execute(self, period_key: Optional[str]) -> SalesForecastDTO:
        """Generate the forecast for the period registered under ``period_key``.

        A missing or empty key selects the default period.
        """

        period_key = period_key or DEFAULT_FORECAST_PERIOD
        try:
            period = resolve_forecast_period(period_key)
        except InvalidForecastPeriodError as exc:
            logger.warning("forecast.invalid_period", period=period_key)
            raise SalesForecastValidationError(exc.message) from exc

        now = self._clock()
        since = self._lookback_start(now)

        logger.info(
            "forecast.start",
            period=period.key,
            since=since.isoformat(),
            excluded_status=self.excluded_status,
        )

        try:
            records = await self.order_store_gateway.fetch_orders(
                since=since, excluded_status=self.excluded_status
            )
        except OrderStoreError as exc:
            logger.error(
                "forecast.order_store_failed",
                period=period.key,
                error=exc.message,
            )
            raise SalesForecastDependencyError(
                f"Failed to load order history: {exc.message}"
            ) from exc

        forecast = build_forecast(
            records,
            period,
            anchor=now.date(),
            variance_scale=self.variance_scale,
            minimum_observations=self.minimum_observations,
            history_window=self.history_window,
        )

        logger.info(
            "forecast.completed",
            period=period.key,
            orders=len(records),
            confidence=forecast.confidence,
            trend=forecast.trend.value,
        )

        return SalesForecastDTO.from_domain(forecast, generated_at=now)

    def _lookback_start(self, now: datetime) -> datetime:
        try:
            return now.replace(year=now.year - self.lookback_years)
        except ValueError:
            # 29 February in a non-leap target year
            return now.replace(year=now.year - self.lookback_years, day=28)
