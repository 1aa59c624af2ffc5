from __future__ import annotations

from datetime import datetime, timezone

from src.application.dtos.health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    SystemHealthDTO,
)
from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def test_dependency_status_dto_from_domain() -> None:
    domain = DependencyStatus(
        name="order_store",
        status=ServiceStatus.DEGRADED,
        message="timeout",
        latency_ms=5000.0,
    )
    dto = DependencyStatusDTO.from_domain(domain)
    assert dto.name == "order_store"
    assert dto.status is ServiceStatus.DEGRADED
    assert dto.latency_ms == 5000.0


def test_system_health_dto_from_domain() -> None:
    domain = SystemHealth(status=ServiceStatus.UP, dependencies=[])
    dto = SystemHealthDTO.from_domain(domain)
    assert dto.status is ServiceStatus.UP
    assert dto.dependencies == []


def test_application_info_dto_from_domain() -> None:
    now = datetime.now(timezone.utc)
    info = ApplicationInfo(
        name="Sales Forecast Service",
        description="desc",
        version="1.0",
        environment="development",
        git_commit="abc",
        build_time="2024-09-01",
        started_at=now,
        uptime_seconds=42.0,
        status=ServiceStatus.UP,
        dependencies=[DependencyStatus(name="order_store", status=ServiceStatus.UP)],
        extras={"forecast": {"lookback_years": 2}},
    )

    dto = ApplicationInfoDTO.from_domain(info)
    assert dto.name == "Sales Forecast Service"
    assert dto.status is ServiceStatus.UP
    assert dto.extras == {"forecast": {"lookback_years": 2}}


def test_system_health_dto_reports_dependency_details() -> None:
    order_store = DependencyStatus(
        name="order_store",
        status=ServiceStatus.DEGRADED,
        message="Order store query failed: HTTP error 401",
        details={"table": "orders", "status_code": 401},
    )

    dto = SystemHealthDTO.from_domain(SystemHealth.from_dependencies([order_store]))

    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[0].details == {"table": "orders", "status_code": 401}
    assert dto.model_dump(mode="json")["status"] == "degraded"
