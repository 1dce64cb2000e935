"""Domain ports package."""

from .health_check import IHealthCheckService, Probe

__all__ = ["IHealthCheckService", "Probe"]
