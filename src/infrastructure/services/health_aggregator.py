"""Health aggregator: runs named probes concurrently and reduces their results."""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from src.domain.entities.errors import ProbeFailure
from src.domain.entities.health import (
    CheckResult,
    CheckSeverity,
    HealthReport,
    HealthStatus,
    ProbeOutcome,
)
from src.domain.ports.health_check import IHealthCheckService, Probe
from src.infrastructure.database import DocumentDatabase
from src.infrastructure.services.probes import (
    database_ping_probe,
    http_endpoint_probe,
    redis_ping_probe,
)
from src.shared import get_logger

logger = get_logger(__name__)

DEFAULT_PROBE_TIMEOUT = 5.0


@dataclass(frozen=True)
class RegisteredCheck:
    """A probe together with the options it was registered with."""

    name: str
    probe: Probe
    severity: CheckSeverity = CheckSeverity.CRITICAL
    timeout: Optional[float] = None
    tags: FrozenSet[str] = frozenset()


class HealthAggregator(IHealthCheckService):
    """
    Registry of named probes.

    Every probe runs as its own task under its own timeout. A probe that
    raises, times out or returns something other than a ProbeOutcome is
    reported as failed; the aggregator itself never raises because of a
    probe. Any non-Healthy outcome takes the check's failure status, so a
    critical result is only ever Healthy or Unhealthy.
    """

    def __init__(self, *, default_timeout: float = DEFAULT_PROBE_TIMEOUT) -> None:
        if default_timeout <= 0:
            raise ValueError("default_timeout must be positive")
        self._default_timeout = default_timeout
        self._checks: Dict[str, RegisteredCheck] = {}

    @property
    def check_names(self) -> List[str]:
        return list(self._checks)

    def register_check(
        self,
        name: str,
        probe: Probe,
        *,
        severity: CheckSeverity = CheckSeverity.CRITICAL,
        timeout: Optional[float] = None,
        tags: Iterable[str] = (),
    ) -> None:
        """
        Register ``probe`` under ``name``.

        Registering an existing name replaces the previous probe.

        Args:
            name: Unique check name, reported as the key in the results.
            probe: Async callable (or plain callable, run in a worker
                thread) returning a ProbeOutcome.
            severity: NON_CRITICAL checks report Degraded instead of
                Unhealthy when they fail.
            timeout: Seconds before the probe is abandoned; defaults to the
                aggregator timeout.
            tags: Labels used to select a subset of checks in ``run_all``.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Check name must be a non-empty string")
        if not callable(probe):
            raise TypeError(f"Probe for check '{name}' is not callable")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")

        if name in self._checks:
            logger.debug("health.check.replaced", check=name)

        self._checks[name] = RegisteredCheck(
            name=name,
            probe=probe,
            severity=CheckSeverity(severity),
            timeout=timeout,
            tags=frozenset(tags),
        )

    def unregister_check(self, name: str) -> bool:
        return self._checks.pop(name, None) is not None

    async def run_all(
        self,
        *,
        tags: Optional[Iterable[str]] = None,
        timeout: Optional[float] = None,
    ) -> HealthReport:
        """
        Run the selected checks concurrently and aggregate the results.

        Args:
            tags: When given, only checks carrying at least one of these
                tags run.
            timeout: Timeout for checks registered without their own.

        Returns:
            A report with exactly one result per selected check.

        Raises:
            ValueError: If ``timeout`` is not positive.
        """
        if timeout is not None and timeout <= 0:
            raise ValueError("Run timeout must be positive")

        selected = self._select(tags)
        start = perf_counter()

        tasks = [
            asyncio.create_task(self._run_check(check, timeout), name=check.name)
            for check in selected
        ]
        try:
            results = await asyncio.gather(*tasks)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info("health.run.cancelled", checks=len(tasks))
            raise

        report = HealthReport.from_results(results, perf_counter() - start)
        logger.debug(
            "health.run.completed",
            status=report.status.value,
            checks=len(results),
            total_duration=report.total_duration,
        )
        return report

    def _select(self, tags: Optional[Iterable[str]]) -> List[RegisteredCheck]:
        if tags is None:
            return list(self._checks.values())
        wanted = frozenset(tags)
        return [check for check in self._checks.values() if check.tags & wanted]

    async def _run_check(
        self, check: RegisteredCheck, run_timeout: Optional[float]
    ) -> CheckResult:
        limit = check.timeout or run_timeout or self._default_timeout
        start = perf_counter()

        try:
            outcome = await asyncio.wait_for(self._invoke(check.probe), timeout=limit)
            if not isinstance(outcome, ProbeOutcome):
                raise ProbeFailure(
                    f"Probe returned {type(outcome).__name__}, expected ProbeOutcome"
                )
        except asyncio.TimeoutError:
            return self._failed(
                check, start, f"Probe timed out after {limit}s", {"timeout": limit}
            )
        except asyncio.CancelledError as exc:
            # Only a cancelled run propagates; a check raising it is a failure.
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            return self._failed(
                check,
                start,
                str(exc) or "Check was cancelled",
                {"type": "CancelledError"},
            )
        except ProbeFailure as exc:
            return self._failed(check, start, exc.message, exc.details)
        except Exception as exc:
            return self._failed(check, start, str(exc), {"type": type(exc).__name__})

        status = outcome.status
        if status is not HealthStatus.HEALTHY:
            status = check.severity.failure_status()

        return CheckResult(
            name=check.name,
            status=status,
            description=outcome.description,
            duration=perf_counter() - start,
            data=outcome.data,
            severity=check.severity,
            tags=check.tags,
        )

    @staticmethod
    async def _invoke(probe: Probe) -> Any:
        if inspect.iscoroutinefunction(probe):
            return await probe()
        result = await asyncio.to_thread(probe)
        if inspect.isawaitable(result):
            result = await result
        return result

    @staticmethod
    def _failed(
        check: RegisteredCheck,
        start: float,
        message: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> CheckResult:
        duration = perf_counter() - start
        error = message or "Probe failed"
        logger.warning(
            "health.check.failed",
            check=check.name,
            error=error,
            duration=duration,
        )
        return CheckResult(
            name=check.name,
            status=check.severity.failure_status(),
            description=f"Check '{check.name}' failed",
            duration=duration,
            error=error,
            data=data or {},
            severity=check.severity,
            tags=check.tags,
        )


def create_health_aggregator(
    database: Optional[DocumentDatabase],
    *,
    redis_url: Optional[str] = None,
    http_dependencies: Optional[Mapping[str, str]] = None,
    default_timeout: float = DEFAULT_PROBE_TIMEOUT,
    http_timeout: float = 5.0,
) -> HealthAggregator:
    """Build an aggregator with the probes the service configuration asks for."""
    aggregator = HealthAggregator(default_timeout=default_timeout)

    if database is not None:
        aggregator.register_check(
            "database", database_ping_probe(database), tags=("db", "ready")
        )
    if redis_url:
        aggregator.register_check(
            "cache",
            redis_ping_probe(redis_url, socket_timeout=http_timeout),
            severity=CheckSeverity.NON_CRITICAL,
            tags=("cache", "ready"),
        )
    for name, base_url in (http_dependencies or {}).items():
        aggregator.register_check(
            name,
            http_endpoint_probe(base_url, timeout=http_timeout),
            tags=("http", "ready"),
        )

    return aggregator
