"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Interface for retrieving the health of the service's dependencies."""

    async def evaluate(self) -> SystemHealth:
        """Check each dependency (the order store today) and aggregate the result."""
        ...
