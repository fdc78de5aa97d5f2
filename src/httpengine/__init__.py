r"""httpengine - HTTP request execution engine with retries, backoff and
redirects.

This package turns a configured logical request into one or more physical
transmissions against a pluggable transport. Every unsuccessful outcome is
offered to an unsuccessful response handler, a backoff policy and the
redirect logic, all sharing a single retry budget.

Key Features:
    - One retry budget shared by I/O retries, handler retries, backoff
      retries and redirects
    - Pluggable backoff policies (exponential and constant provided)
    - Redirect following with 303 method downgrade and header stripping
    - Asynchronous execution on any task runner, with cancellation
    - Transport based on httpx, and in-memory transports for tests
    - Callback system for observability (logging, metrics, alerting)

Example:
    ```pycon
    >>> from httpengine import ExponentialBackOffPolicy, HttpxTransport
    >>> with HttpxTransport() as transport:  # doctest: +SKIP
    ...     request = transport.create_request_factory().build_get_request(
    ...         "https://api.example.com/data"
    ...     )
    ...     request.backoff_policy = ExponentialBackOffPolicy()
    ...     response = request.execute()
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "STOP",
    "BackOffPolicy",
    "ByteArrayContent",
    "CallbackConfig",
    "CompositeUnsuccessfulResponseHandler",
    "ConstantBackOffPolicy",
    "ExponentialBackOffPolicy",
    "HttpContent",
    "HttpHeaders",
    "HttpRequest",
    "HttpRequestFactory",
    "HttpResponse",
    "HttpResponseError",
    "HttpTransport",
    "HttpxTransport",
    "MockHttpTransport",
    "RequestConfig",
    "RequestExecutor",
    "ResponseFuture",
    "UnsuccessfulResponseHandler",
    "__version__",
    "execute_async",
    "execute_in_event_loop",
]

from importlib.metadata import PackageNotFoundError, version

from httpengine.async_execution import (
    ResponseFuture,
    execute_async,
    execute_in_event_loop,
)
from httpengine.backoff import (
    STOP,
    BackOffPolicy,
    ConstantBackOffPolicy,
    ExponentialBackOffPolicy,
)
from httpengine.callbacks import CallbackConfig
from httpengine.config import RequestConfig
from httpengine.content import ByteArrayContent, HttpContent
from httpengine.exceptions import HttpResponseError
from httpengine.executor import RequestExecutor
from httpengine.factory import HttpRequestFactory
from httpengine.handler import (
    CompositeUnsuccessfulResponseHandler,
    UnsuccessfulResponseHandler,
)
from httpengine.headers import HttpHeaders
from httpengine.request import HttpRequest
from httpengine.response import HttpResponse
from httpengine.transport import HttpTransport, HttpxTransport, MockHttpTransport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
