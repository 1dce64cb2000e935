"""Domain abstractions for health checks."""

from __future__ import annotations

from typing import Awaitable, Callable, Iterable, Optional, Protocol, Union

from src.domain.entities.health import HealthReport, ProbeOutcome

Probe = Callable[[], Union[Awaitable[ProbeOutcome], ProbeOutcome]]


class IHealthCheckService(Protocol):
    """Interface for producing a health report."""

    async def run_all(
        self,
        *,
        tags: Optional[Iterable[str]] = None,
        timeout: Optional[float] = None,
    ) -> HealthReport:
        """Run the registered probes and aggregate their results."""
        ...
