"""Request and response records exchanged with a test host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import httpx

from src.domain.entities.errors import RequestError

TRANSPORT_FAILURE_STATUS = 503


@dataclass(frozen=True)
class HostRequest:
    """A request to send to a test host: verb, path, JSON body, headers."""

    method: str
    path: str
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"Request path must start with '/': {self.path!r}")
        object.__setattr__(self, "method", self.method.upper())


@dataclass(frozen=True)
class HostResponse:
    """
    A complete response from a test host.

    Failed requests come back as responses too: ``error`` carries a
    RequestError whenever the status code is 400 or above, or when the
    request never produced an HTTP response.
    """

    status_code: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    error: Optional[RequestError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status_code < 400

    def json(self) -> Any:
        return self.body

    def raise_for_error(self) -> "HostResponse":
        if self.error is not None:
            raise self.error
        return self

    @classmethod
    def from_httpx(
        cls, request: HostRequest, response: httpx.Response
    ) -> "HostResponse":
        body = _decode_body(response)
        error = None
        if response.status_code >= 400:
            detail = body.get("detail") if isinstance(body, dict) else None
            error = RequestError(
                str(detail) if detail else f"HTTP {response.status_code}",
                status_code=response.status_code,
                details={"method": request.method, "path": request.path},
            )
        return cls(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
            error=error,
        )

    @classmethod
    def from_exception(
        cls, request: HostRequest, exc: BaseException
    ) -> "HostResponse":
        message = str(exc) or type(exc).__name__
        return cls(
            status_code=TRANSPORT_FAILURE_STATUS,
            error=RequestError(
                message,
                status_code=TRANSPORT_FAILURE_STATUS,
                details={
                    "method": request.method,
                    "path": request.path,
                    "type": type(exc).__name__,
                },
            ),
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
