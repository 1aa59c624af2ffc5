from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
)
from src.domain.entities.errors import OrderStoreError
from src.main.app import create_app
from src.main.container import get_container


@pytest.fixture()
def client_factory(gateway_factory, fixed_now):
    clients = []

    def _build(records=None, error=None, variance_scale=1e12) -> TestClient:
        app = create_app()
        container = get_container()
        gateway = gateway_factory(records=records, error=error)

        container.order_store_gateway.override(providers.Object(gateway))
        container.generate_sales_forecast_use_case.override(
            providers.Factory(
                GenerateSalesForecastUseCase,
                order_store_gateway=gateway,
                variance_scale=variance_scale,
                clock=lambda: fixed_now,
            )
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _build

    for client in clients:
        client.__exit__(None, None, None)


def test_forecast_for_growing_year(client_factory, linear_sales_orders):
    client = client_factory(records=linear_sales_orders)

    response = client.get("/analytics/forecast", params={"period": "3_months"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["period"] == "Next 3 Months"
    assert payload["months"] == 3
    assert payload["trend"] == "increasing"
    assert payload["confidence"] > 70
    assert len(payload["historicalData"]) == 12
    assert payload["historicalData"][0]["totalSales"] == 10_000
    assert payload["historicalData"][0]["orderCount"] == 4
    breakdown = payload["monthlyBreakdown"]
    assert [month["month"] for month in breakdown] == ["2025-01", "2025-02", "2025-03"]
    assert (
        breakdown[0]["predictedSales"]
        < breakdown[1]["predictedSales"]
        < breakdown[2]["predictedSales"]
    )
    assert payload["predictedSales"] > 0
    assert payload["predictedAOV"] > 0
    assert payload["generatedAt"].startswith("2024-12-15T09:30:00")


def test_forecast_defaults_to_three_months(client_factory, linear_sales_orders):
    client = client_factory(records=linear_sales_orders)

    response = client.get("/analytics/forecast")

    assert response.status_code == 200
    assert response.json()["months"] == 3


def test_forecast_empty_period_falls_back_to_three_months(
    client_factory, linear_sales_orders
):
    client = client_factory(records=linear_sales_orders)

    response = client.get("/analytics/forecast?period=")

    assert response.status_code == 200
    payload = response.json()
    assert payload["period"] == "Next 3 Months"
    assert payload["months"] == 3
    assert len(payload["monthlyBreakdown"]) == 3


def test_forecast_without_orders(client_factory):
    client = client_factory(records=[])

    response = client.get("/analytics/forecast", params={"period": "1_year"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["period"] == "Next Year"
    assert payload["confidence"] == 0
    assert payload["predictedSales"] == 0
    assert payload["historicalData"] == []
    assert payload["monthlyBreakdown"] == []


def test_forecast_rejects_unknown_period(client_factory):
    client = client_factory(records=[])

    response = client.get("/analytics/forecast", params={"period": "2_weeks"})

    assert response.status_code == 400
    assert "Invalid forecast period" in response.json()["detail"]


def test_forecast_order_store_failure_returns_502(client_factory):
    client = client_factory(error=OrderStoreError("Order store HTTP error 500"))

    response = client.get("/analytics/forecast", params={"period": "1_month"})

    assert response.status_code == 502
    assert "Order store HTTP error 500" in response.json()["detail"]
