"""
Testing Package

Ephemeral, isolated service instances for unit, integration and
end-to-end tests.
"""

from .client import AsyncHostClient, HostClient
from .host import (
    AsyncTestHost,
    TestHost,
    TestHostConfig,
    async_ephemeral_host,
    create_test_host,
    ephemeral_host,
)
from .messages import HostRequest, HostResponse

__all__ = [
    "AsyncHostClient",
    "AsyncTestHost",
    "HostClient",
    "HostRequest",
    "HostResponse",
    "TestHost",
    "TestHostConfig",
    "async_ephemeral_host",
    "create_test_host",
    "ephemeral_host",
]
