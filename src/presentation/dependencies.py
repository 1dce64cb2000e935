"""
FastAPI dependencies resolving providers from the app's own container.

Each application keeps its container on ``app.state.container``; routers
ask for providers by name and get them from the container of the app that
is serving the request.
"""

from typing import Any, Callable

from fastapi import Request


def provide(provider_name: str) -> Callable[[Request], Any]:
    """Return a dependency that calls ``provider_name`` on the request's container."""

    def _resolve(request: Request) -> Any:
        container = request.app.state.container
        return getattr(container, provider_name)()

    _resolve.__name__ = f"provide_{provider_name}"
    return _resolve
