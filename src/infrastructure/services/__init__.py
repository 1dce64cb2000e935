"""Infrastructure services package."""

from .health_aggregator import (
    HealthAggregator,
    RegisteredCheck,
    create_health_aggregator,
)
from .probes import database_ping_probe, http_endpoint_probe, redis_ping_probe

__all__ = [
    "HealthAggregator",
    "RegisteredCheck",
    "create_health_aggregator",
    "database_ping_probe",
    "http_endpoint_probe",
    "redis_ping_probe",
]
