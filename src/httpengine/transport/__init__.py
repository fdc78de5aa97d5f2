r"""Transports performing the physical HTTP exchanges.

This package provides the transport interfaces, a transport based on
``httpx.Client`` and in-memory doubles for tests.
"""

from __future__ import annotations

__all__ = [
    "BASIC_METHODS",
    "HTTP_METHODS",
    "HttpTransport",
    "HttpxLowLevelRequest",
    "HttpxTransport",
    "LowLevelHttpRequest",
    "LowLevelHttpResponse",
    "MockHttpTransport",
    "MockLowLevelHttpRequest",
    "MockLowLevelHttpResponse",
]

from httpengine.transport.base import (
    BASIC_METHODS,
    HTTP_METHODS,
    HttpTransport,
    LowLevelHttpRequest,
    LowLevelHttpResponse,
)
from httpengine.transport.httpx_transport import HttpxLowLevelRequest, HttpxTransport
from httpengine.transport.mock import (
    MockHttpTransport,
    MockLowLevelHttpRequest,
    MockLowLevelHttpResponse,
)
