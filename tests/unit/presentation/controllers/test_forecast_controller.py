from __future__ import annotations

from typing import cast

import pytest
from fastapi import HTTPException

from src.application.dtos.forecast_dto import SalesForecastDTO
from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
    SalesForecastDependencyError,
    SalesForecastError,
    SalesForecastValidationError,
)
from src.domain.entities.forecast import TrendDirection
from src.presentation.controllers.forecast_controller import get_sales_forecast


class _StubForecastUseCase:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.periods: list[str] = []
        self.response = SalesForecastDTO(
            period="Next 3 Months",
            months=3,
            predicted_sales=0,
            predicted_orders=0,
            predicted_aov=0,
            confidence=0,
            trend=TrendDirection.STABLE,
            seasonality=1.0,
        )

    async def execute(self, period_key: str) -> SalesForecastDTO:
        self.periods.append(period_key)
        if self.error:
            raise self.error
        return self.response


def _as_use_case(use_case: _StubForecastUseCase) -> GenerateSalesForecastUseCase:
    return cast(GenerateSalesForecastUseCase, use_case)


@pytest.mark.asyncio
async def test_get_sales_forecast_returns_dto() -> None:
    use_case = _StubForecastUseCase()

    dto = await get_sales_forecast(
        period="3_months", forecast_use_case=_as_use_case(use_case)
    )

    assert dto is use_case.response
    assert use_case.periods == ["3_months"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, status_code",
    [
        (SalesForecastValidationError("Invalid forecast period: 2_weeks"), 400),
        (SalesForecastDependencyError("Failed to load order history"), 502),
        (SalesForecastError("bad request"), 400),
    ],
)
async def test_get_sales_forecast_maps_errors(error, status_code) -> None:
    use_case = _StubForecastUseCase(error=error)

    with pytest.raises(HTTPException) as exc_info:
        await get_sales_forecast(
            period="2_weeks", forecast_use_case=_as_use_case(use_case)
        )

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == str(error)


@pytest.mark.asyncio
async def test_get_sales_forecast_hides_unexpected_errors() -> None:
    use_case = _StubForecastUseCase(error=RuntimeError("division by zero"))

    with pytest.raises(HTTPException) as exc_info:
        await get_sales_forecast(
            period="1_month", forecast_use_case=_as_use_case(use_case)
        )

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to generate sales forecast"
