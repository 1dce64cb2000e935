"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .errors import (
    ConfigurationError,
    DomainError,
    ItemNotFoundError,
    ItemOperationError,
    ItemValidationError,
    ProbeFailure,
    RequestError,
)
from .health import (
    ApplicationInfo,
    CheckResult,
    CheckSeverity,
    HealthReport,
    HealthStatus,
    ProbeOutcome,
)
from .item import Item

__all__ = [
    "Item",
    "HealthStatus",
    "CheckSeverity",
    "CheckResult",
    "HealthReport",
    "ProbeOutcome",
    "ApplicationInfo",
    "DomainError",
    "ItemNotFoundError",
    "ItemValidationError",
    "ItemOperationError",
    "ConfigurationError",
    "ProbeFailure",
    "RequestError",
]
