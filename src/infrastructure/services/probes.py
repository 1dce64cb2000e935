"""Built-in health probes for the dependencies the service talks to."""

from __future__ import annotations

from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Awaitable, Callable, Dict, Iterable, List
from urllib.parse import urljoin

import httpx
import redis.asyncio as aioredis

from src.domain.entities.errors import ProbeFailure
from src.domain.entities.health import HealthStatus, ProbeOutcome
from src.infrastructure.database import DocumentDatabase

AsyncProbe = Callable[[], Awaitable[ProbeOutcome]]


def _elapsed_ms(start: float) -> float:
    return round((perf_counter() - start) * 1000, 3)


def database_ping_probe(database: DocumentDatabase) -> AsyncProbe:
    """Ping the document database the repositories use."""

    async def probe() -> ProbeOutcome:
        start = perf_counter()
        try:
            await database.ping()
        except Exception as exc:
            raise ProbeFailure(
                f"Database ping failed: {exc}",
                details={"database": database.name, "latency_ms": _elapsed_ms(start)},
            ) from exc
        return ProbeOutcome.healthy(
            "Database ping successful",
            database=database.name,
            latency_ms=_elapsed_ms(start),
        )

    return probe


def redis_ping_probe(redis_url: str, *, socket_timeout: float = 5.0) -> AsyncProbe:
    """Open a short-lived Redis connection and ping it."""

    async def probe() -> ProbeOutcome:
        start = perf_counter()
        client = aioredis.from_url(
            redis_url,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )
        try:
            await client.ping()
        except Exception as exc:
            raise ProbeFailure(
                f"Redis ping failed: {exc}", details={"latency_ms": _elapsed_ms(start)}
            ) from exc
        finally:
            await client.aclose()
        return ProbeOutcome.healthy(
            "Redis ping successful", latency_ms=_elapsed_ms(start)
        )

    return probe


def normalize_url(base_url: str, path: str) -> str:
    if not path:
        return base_url
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    return urljoin(base, path.lstrip("/"))


def http_endpoint_probe(
    base_url: str,
    paths: Iterable[str] = ("/",),
    *,
    timeout: float = 5.0,
) -> AsyncProbe:
    """
    GET each path under ``base_url`` until one answers below 500.

    A 2xx/3xx answer is healthy and a 4xx answer unhealthy; the aggregator
    maps the latter by severity. When every path answers 5xx or cannot be
    reached the probe fails with the attempts log as diagnostic data.
    """
    candidate_paths = tuple(paths) or ("/",)

    async def probe() -> ProbeOutcome:
        attempts: List[Dict[str, Any]] = []

        async with httpx.AsyncClient(timeout=timeout) as client:
            for path in candidate_paths:
                url = normalize_url(base_url, path)
                start = perf_counter()
                attempt: Dict[str, Any] = {
                    "url": url,
                    "checked_at": datetime.now(timezone.utc).isoformat(),
                }
                try:
                    response = await client.get(url)
                except httpx.RequestError as exc:
                    attempt.update(error=str(exc), latency_ms=_elapsed_ms(start))
                    attempts.append(attempt)
                    continue

                status_code = response.status_code
                attempt.update(status_code=status_code, latency_ms=_elapsed_ms(start))
                attempts.append(attempt)

                if status_code >= 500:
                    continue
                status = HealthStatus.HEALTHY
                if status_code >= 400:
                    status = HealthStatus.UNHEALTHY
                return ProbeOutcome(
                    status=status,
                    description=f"HTTP {status_code}",
                    data={"url": url, "status_code": status_code, "attempts": attempts},
                )

        raise ProbeFailure(
            f"No healthy response from {base_url}", details={"attempts": attempts}
        )

    return probe
