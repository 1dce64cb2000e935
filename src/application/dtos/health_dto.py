"""DTOs for the health report and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer

from src.domain.entities.health import (
    ApplicationInfo,
    CheckResult,
    CheckSeverity,
    HealthReport,
    HealthStatus,
)


def format_duration(seconds: float) -> str:
    """Render a duration in seconds as ``"<seconds>s"``."""
    return f"{seconds:.4f}s"


def parse_duration(value: Any) -> Any:
    """Accept durations in their rendered ``"<seconds>s"`` form."""
    if isinstance(value, str) and value.endswith("s"):
        return value[:-1]
    return value


Duration = Annotated[float, BeforeValidator(parse_duration)]


class CheckResultDTO(BaseModel):
    """Serializable representation of one check result."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "Healthy",
                "description": "Database ping successful",
                "duration": "0.0021s",
                "exceptionMessage": None,
                "data": {"database": "healthbench", "latency_ms": 2.1},
                "severity": "critical",
                "tags": ["db", "ready"],
            }
        },
    )

    status: HealthStatus = Field(description="Status reported for the check")
    description: str = Field(default="", description="Human readable status note")
    duration: Duration = Field(
        description="Time spent running the probe, in seconds"
    )
    exception_message: Optional[str] = Field(
        default=None,
        alias="exceptionMessage",
        description="Error raised by the probe, if any",
    )
    data: Dict[str, Any] = Field(
        default_factory=dict, description="Diagnostic data reported by the probe"
    )
    severity: CheckSeverity = Field(
        default=CheckSeverity.CRITICAL, description="Severity tag of the check"
    )
    tags: List[str] = Field(default_factory=list, description="Check tags")

    @field_serializer("duration", when_used="json")
    def _serialize_duration(self, value: float) -> str:
        return format_duration(value)

    @classmethod
    def from_domain(cls, result: CheckResult) -> "CheckResultDTO":
        return cls(
            status=result.status,
            description=result.description,
            duration=result.duration,
            exception_message=result.error,
            data=dict(result.data),
            severity=result.severity,
            tags=sorted(result.tags),
        )


class HealthReportDTO(BaseModel):
    """DTO representing the /health response payload."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "Unhealthy",
                "totalDuration": "0.0154s",
                "results": {
                    "database": {
                        "status": "Healthy",
                        "description": "Database ping successful",
                        "duration": "0.0021s",
                        "exceptionMessage": None,
                        "data": {},
                        "severity": "critical",
                        "tags": ["db"],
                    },
                    "cache": {
                        "status": "Unhealthy",
                        "description": "Check 'cache' failed",
                        "duration": "0.0150s",
                        "exceptionMessage": "Redis ping failed: Connection refused",
                        "data": {},
                        "severity": "critical",
                        "tags": ["cache"],
                    },
                },
            }
        },
    )

    status: HealthStatus = Field(description="Overall service status")
    total_duration: Duration = Field(
        alias="totalDuration", description="Wall time of the whole run, in seconds"
    )
    results: Dict[str, CheckResultDTO] = Field(
        default_factory=dict, description="Per-check results keyed by check name"
    )

    @field_serializer("total_duration", when_used="json")
    def _serialize_total_duration(self, value: float) -> str:
        return format_duration(value)

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthReportDTO":
        return cls(
            status=report.status,
            total_duration=report.total_duration,
            results={
                name: CheckResultDTO.from_domain(result)
                for name, result in report.results.items()
            },
        )


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "HealthBench",
                "description": "Health reporting service",
                "version": "1.0.0",
                "environment": "development",
                "git_commit": "abcdef1",
                "build_time": "2026-01-10T11:30:00Z",
                "started_at": "2026-01-10T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "Healthy",
                "health": {
                    "status": "Healthy",
                    "totalDuration": "0.0010s",
                    "results": {},
                },
                "extras": {"database": {"uri": "mongodb://mongo:27017"}},
            }
        },
    )

    name: str = Field(description="Application name")
    description: str = Field(description="Application description")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current deployment environment")
    git_commit: str = Field(description="Git commit hash")
    build_time: str = Field(description="Build timestamp")
    started_at: datetime = Field(description="Application start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    status: HealthStatus = Field(description="Overall service status")
    health: HealthReportDTO = Field(description="Health report snapshot")
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata and diagnostic information",
    )

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
            status=info.health.status,
            health=HealthReportDTO.from_domain(info.health),
            extras=info.extras,
        )
