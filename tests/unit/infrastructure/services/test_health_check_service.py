from __future__ import annotations

import asyncio

import pytest

from src.domain.entities.errors import OrderStoreError
from src.domain.entities.health import ServiceStatus
from src.infrastructure.services.health_check_service import HealthCheckService


class _SlowGateway:
    async def fetch_orders(self, since, excluded_status="Cancelled"):
        return []

    async def ping(self) -> None:
        await asyncio.sleep(1)


@pytest.mark.asyncio
async def test_evaluate_reports_order_store_up(gateway_factory) -> None:
    gateway = gateway_factory()
    service = HealthCheckService(gateway, orders_table="orders")

    health = await service.evaluate()

    assert health.status is ServiceStatus.UP
    assert gateway.pings == 1
    dependency = health.dependencies[0]
    assert dependency.name == "order_store"
    assert dependency.message == "Order store query successful"
    assert dependency.details == {"table": "orders"}
    assert dependency.latency_ms is not None


@pytest.mark.asyncio
async def test_evaluate_server_error_is_down(gateway_factory) -> None:
    gateway = gateway_factory(
        error=OrderStoreError("HTTP 503", details={"status_code": 503})
    )
    service = HealthCheckService(gateway)

    health = await service.evaluate()

    assert health.status is ServiceStatus.DOWN
    assert health.dependencies[0].details["status_code"] == 503


@pytest.mark.asyncio
async def test_evaluate_client_error_is_degraded(gateway_factory) -> None:
    gateway = gateway_factory(
        error=OrderStoreError("HTTP 401", details={"status_code": 401})
    )
    service = HealthCheckService(gateway)

    health = await service.evaluate()

    assert health.status is ServiceStatus.DEGRADED


@pytest.mark.asyncio
async def test_evaluate_transport_error_is_down(gateway_factory) -> None:
    service = HealthCheckService(gateway_factory(error=OrderStoreError("refused")))

    health = await service.evaluate()

    assert health.status is ServiceStatus.DOWN
    assert "refused" in health.dependencies[0].message


@pytest.mark.asyncio
async def test_evaluate_timeout_is_degraded() -> None:
    service = HealthCheckService(_SlowGateway(), timeout=0.01)

    health = await service.evaluate()

    assert health.status is ServiceStatus.DEGRADED
    assert "did not answer" in health.dependencies[0].message


@pytest.mark.asyncio
async def test_evaluate_without_gateway_is_unknown() -> None:
    service = HealthCheckService(None)

    health = await service.evaluate()

    assert health.status is ServiceStatus.UNKNOWN
