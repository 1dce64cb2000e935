"""
Health domain entities.

Value objects produced by health probes and aggregated into one report
per run. Durations are kept as float seconds; formatting is left to the
presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional


class HealthStatus(str, Enum):
    """Status of one check or of the whole service."""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"


class CheckSeverity(str, Enum):
    """How much a failing check counts towards the overall status."""

    CRITICAL = "critical"
    NON_CRITICAL = "non_critical"

    def failure_status(self) -> HealthStatus:
        if self is CheckSeverity.NON_CRITICAL:
            return HealthStatus.DEGRADED
        return HealthStatus.UNHEALTHY


@dataclass(frozen=True, slots=True)
class ProbeOutcome:
    """What a probe reports about the dependency it looked at."""

    status: HealthStatus
    description: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def healthy(cls, description: str = "", **data: Any) -> "ProbeOutcome":
        return cls(status=HealthStatus.HEALTHY, description=description, data=data)

    @classmethod
    def unhealthy(cls, description: str = "", **data: Any) -> "ProbeOutcome":
        return cls(status=HealthStatus.UNHEALTHY, description=description, data=data)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a single named check within one aggregator run."""

    name: str
    status: HealthStatus
    description: str = ""
    duration: float = 0.0
    error: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)
    severity: CheckSeverity = CheckSeverity.CRITICAL
    tags: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        object.__setattr__(self, "tags", frozenset(self.tags))


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Aggregated result of one aggregator run."""

    status: HealthStatus
    total_duration: float
    results: Mapping[str, CheckResult]
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    @classmethod
    def from_results(
        cls, results: Iterable[CheckResult], total_duration: float
    ) -> "HealthReport":
        by_name = {result.name: result for result in results}
        return cls(
            status=reduce_status(by_name.values()),
            total_duration=total_duration,
            results=by_name,
        )


def reduce_status(results: Iterable[CheckResult]) -> HealthStatus:
    """Unhealthy if any result is, else Degraded if any result is, else Healthy."""
    has_degraded = False

    for result in results:
        if result.status == HealthStatus.UNHEALTHY:
            return HealthStatus.UNHEALTHY
        if result.status == HealthStatus.DEGRADED:
            has_degraded = True

    return HealthStatus.DEGRADED if has_degraded else HealthStatus.HEALTHY


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: HealthReport
    extras: Dict[str, Any] = field(default_factory=dict)
