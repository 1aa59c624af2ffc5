"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Outcome of the order store check."""

    name: str = Field(description="Dependency identifier, e.g. order_store")
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime
    latency_ms: Optional[float] = Field(
        default=None, description="Round trip of the one-row query in milliseconds"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Orders table name and, on HTTP failures, the status code",
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=dict(status.details),
        )


def _dependencies(statuses: List[DependencyStatus]) -> List[DependencyStatusDTO]:
    return [DependencyStatusDTO.from_domain(status) for status in statuses]


class SystemHealthDTO(BaseModel):
    """Body of GET /health; the endpoint answers 503 when status is down."""

    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(status=health.status, dependencies=_dependencies(health.dependencies))

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "dependencies": [
                    {
                        "name": "order_store",
                        "status": "degraded",
                        "message": "Order store query failed: HTTP error 401",
                        "checked_at": "2024-12-15T09:30:00Z",
                        "latency_ms": 41.0,
                        "details": {"table": "orders", "status_code": 401},
                    }
                ],
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """Body of GET /info.

    ``extras`` carries the order store location (credentials stripped) and
    the look-back settings the forecast runs with.
    """

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float = Field(ge=0)
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=_dependencies(info.dependencies),
            extras=info.extras,
        )
