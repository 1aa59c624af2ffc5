"""
Application DTOs - Sales Forecast

Data Transfer Objects for the sales forecast returned to the admin
console. Fields serialize with the camelCase names the console reads.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.forecast import (
    MonthlyForecast,
    SalesForecast,
    TrendDirection,
)
from src.domain.entities.orders import MonthlyObservation


class MonthlyObservationDTO(BaseModel):
    """Historical sales for one calendar month."""

    month: str = Field(description="Month key (YYYY-MM)")
    year: int
    total_sales: float = Field(alias="totalSales")
    order_count: int = Field(ge=0, alias="orderCount")
    average_order_value: float = Field(alias="averageOrderValue")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, observation: MonthlyObservation) -> "MonthlyObservationDTO":
        return cls(
            month=observation.month_key,
            year=observation.year,
            total_sales=observation.total_sales,
            order_count=observation.order_count,
            average_order_value=observation.average_order_value,
        )


class MonthlyForecastDTO(BaseModel):
    """Predicted sales for one future month."""

    month: str = Field(description="Month key (YYYY-MM)")
    predicted_sales: float = Field(ge=0, alias="predictedSales")
    confidence: int = Field(ge=0, le=100)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, forecast: MonthlyForecast) -> "MonthlyForecastDTO":
        return cls(
            month=forecast.month_key,
            predicted_sales=forecast.predicted_sales,
            confidence=round(forecast.confidence),
        )


class SalesForecastDTO(BaseModel):
    """DTO returned by the sales forecast endpoint."""

    period: str = Field(description="Human readable horizon label")
    months: int = Field(ge=1, le=12, description="Forecast horizon in months")
    predicted_sales: float = Field(alias="predictedSales")
    predicted_orders: float = Field(alias="predictedOrders")
    predicted_aov: float = Field(alias="predictedAOV")
    confidence: int = Field(ge=0, le=100)
    trend: TrendDirection
    seasonality: float = Field(description="Average of the monthly seasonal factors")
    historical_data: List[MonthlyObservationDTO] = Field(
        default_factory=list, alias="historicalData"
    )
    monthly_breakdown: List[MonthlyForecastDTO] = Field(
        default_factory=list, alias="monthlyBreakdown"
    )
    generated_at: Optional[datetime] = Field(
        default=None, alias="generatedAt"
    )

    @classmethod
    def from_domain(
        cls, forecast: SalesForecast, generated_at: Optional[datetime] = None
    ) -> "SalesForecastDTO":
        return cls(
            period=forecast.period_label,
            months=forecast.horizon_months,
            predicted_sales=forecast.predicted_sales,
            predicted_orders=forecast.predicted_orders,
            predicted_aov=forecast.predicted_aov,
            confidence=forecast.confidence,
            trend=forecast.trend,
            seasonality=forecast.seasonality_average,
            historical_data=[
                MonthlyObservationDTO.from_domain(obs)
                for obs in forecast.historical_window
            ],
            monthly_breakdown=[
                MonthlyForecastDTO.from_domain(month)
                for month in forecast.monthly_breakdown
            ],
            generated_at=generated_at,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "period": "Next 3 Months",
                "months": 3,
                "predictedSales": 412500,
                "predictedOrders": 1650,
                "predictedAOV": 250,
                "confidence": 46,
                "trend": "increasing",
                "seasonality": 1.0,
                "historicalData": [
                    {
                        "month": "2024-06",
                        "year": 2024,
                        "totalSales": 120000.0,
                        "orderCount": 480,
                        "averageOrderValue": 250.0,
                    }
                ],
                "monthlyBreakdown": [
                    {"month": "2024-07", "predictedSales": 130000, "confidence": 46}
                ],
                "generatedAt": "2024-06-15T12:00:00Z",
            }
        }
    }
