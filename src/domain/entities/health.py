"""Availability of the order store and operational metadata of the service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


# Worst first; the overall status is the worst one reported.
_STATUS_PRECEDENCE = (
    ServiceStatus.DOWN,
    ServiceStatus.DEGRADED,
    ServiceStatus.UNKNOWN,
)


@dataclass(slots=True)
class DependencyStatus:
    """Result of checking one dependency, the order store being the only one."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(cls, dependencies: Iterable[DependencyStatus]) -> "SystemHealth":
        """Roll dependency results up into one status.

        Down beats degraded, degraded beats unknown; no dependency at all
        counts as up.
        """
        dependencies = list(dependencies)
        reported = {dependency.status for dependency in dependencies}
        for candidate in _STATUS_PRECEDENCE:
            if candidate in reported:
                return cls(status=candidate, dependencies=dependencies)
        return cls(status=ServiceStatus.UP, dependencies=dependencies)


@dataclass(slots=True)
class ApplicationInfo:
    """What /info reports: build identity, uptime and the health snapshot."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
