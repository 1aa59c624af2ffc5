"""
Presentation Layer - Forecast Controller

Exposes the sales forecast consumed by the analytics page of the
admin console.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from src.application.dtos.forecast_dto import SalesForecastDTO
from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
    SalesForecastDependencyError,
    SalesForecastError,
    SalesForecastValidationError,
)
from src.domain.entities.forecast import DEFAULT_FORECAST_PERIOD, FORECAST_PERIODS
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/forecast",
    response_model=SalesForecastDTO,
    summary="Forecast sales for the requested period",
    description=f"""
    Project sales, order count and average order value from the completed
    orders of the look-back window. Supported periods:
    {", ".join(FORECAST_PERIODS)}.
    """,
)
@inject
async def get_sales_forecast(
    period: str = Query(
        default=DEFAULT_FORECAST_PERIOD,
        description="Forecast period key; empty selects the default",
    ),
    forecast_use_case: GenerateSalesForecastUseCase = Depends(
        Provide[AppContainer.generate_sales_forecast_use_case]
    ),
) -> SalesForecastDTO:
    try:
        return await forecast_use_case.execute(period)
    except SalesForecastValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SalesForecastDependencyError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    except SalesForecastError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.error(
            "forecast.unexpected_error",
            period=period,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(
            status_code=500, detail="Failed to generate sales forecast"
        )
