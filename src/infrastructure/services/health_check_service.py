"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Optional

from src.domain.entities.errors import OrderStoreError
from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.gateways.order_store_gateway import IOrderStoreGateway
from src.domain.ports.health_check import IHealthCheckService
from src.shared.consts import ORDER_STORE_DEPENDENCY


class HealthCheckService(IHealthCheckService):
    """Health of the order store, the service's only dependency."""

    def __init__(
        self,
        order_store_gateway: Optional[IOrderStoreGateway],
        orders_table: str = "orders",
        *,
        timeout: float = 5.0,
    ) -> None:
        self._order_store_gateway = order_store_gateway
        self._orders_table = orders_table
        self._timeout = timeout

    async def evaluate(self) -> SystemHealth:
        """Check the order store and report the overall health."""
        return SystemHealth.from_dependencies([await self._check_order_store()])

    async def _check_order_store(self) -> DependencyStatus:
        if self._order_store_gateway is None:
            return DependencyStatus(
                name=ORDER_STORE_DEPENDENCY,
                status=ServiceStatus.UNKNOWN,
                message="Order store gateway not configured.",
            )

        start = perf_counter()
        try:
            await asyncio.wait_for(self._order_store_gateway.ping(), self._timeout)
        except asyncio.TimeoutError:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name=ORDER_STORE_DEPENDENCY,
                status=ServiceStatus.DEGRADED,
                message=f"Order store did not answer within {self._timeout}s",
                latency_ms=latency_ms,
                details={"table": self._orders_table},
            )
        except OrderStoreError as exc:
            latency_ms = (perf_counter() - start) * 1000
            status_code = exc.details.get("status_code")
            status = (
                ServiceStatus.DEGRADED
                if status_code is not None and status_code < 500
                else ServiceStatus.DOWN
            )
            return DependencyStatus(
                name=ORDER_STORE_DEPENDENCY,
                status=status,
                message=f"Order store query failed: {exc.message}",
                latency_ms=latency_ms,
                details={"table": self._orders_table, **exc.details},
            )

        latency_ms = (perf_counter() - start) * 1000
        return DependencyStatus(
            name=ORDER_STORE_DEPENDENCY,
            status=ServiceStatus.UP,
            message="Order store query successful",
            latency_ms=latency_ms,
            details={"table": self._orders_table},
        )
