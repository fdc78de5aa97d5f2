r"""Transport implementation based on ``httpx.Client``.

The transport sends exactly one exchange per ``execute`` call: httpx
redirect following is disabled because redirects are handled by the
executor under the shared retry budget.
"""

from __future__ import annotations

__all__ = ["HttpxLowLevelRequest", "HttpxTransport"]

import logging
from typing import TYPE_CHECKING

import httpx

from httpengine.config import DEFAULT_TIMEOUT
from httpengine.transport.base import (
    HTTP_METHODS,
    HttpTransport,
    LowLevelHttpRequest,
    LowLevelHttpResponse,
)
from httpengine.utils.validation import validate_timeout

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)


class HttpxLowLevelRequest(LowLevelHttpRequest):
    """Low-level request sent with an ``httpx.Client``.

    Args:
        client: The client used to send the request.
        method: The upper-case HTTP method.
        url: The absolute URL.
    """

    def __init__(self, client: httpx.Client, method: str, url: str) -> None:
        super().__init__()
        self._client = client
        self.method = method
        self.url = url

    def execute(self) -> LowLevelHttpResponse:
        headers = list(self.headers)
        if self.content_type is not None:
            headers.append(("content-type", self.content_type))
        if self.content_encoding is not None:
            headers.append(("content-encoding", self.content_encoding))
        content = self.get_content_bytes() if self.content is not None else None
        response = self._client.request(
            self.method,
            self.url,
            headers=headers,
            content=content,
            follow_redirects=False,
        )
        return LowLevelHttpResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=list(response.headers.multi_items()),
            content=response.content,
        )


class HttpxTransport(HttpTransport):
    r"""Transport sending requests with an ``httpx.Client``.

    Two usage patterns are supported:

    **External lifecycle management**: an ``httpx.Client`` created and
    managed by the caller is passed in. ``HttpxTransport`` does *not* close
    it, leaving full control to the caller. Use this pattern to configure
    the client with auth, proxies, limits, etc.

    .. code-block:: python

        import httpx
        from httpengine.transport import HttpxTransport

        with httpx.Client(proxy="http://proxy:8080") as http_client:
            transport = HttpxTransport(client=http_client)
            request = transport.create_request_factory().build_get_request(
                "https://api.example.com/data"
            )
            response = request.execute()
        # http_client is closed here by the outer ``with`` block

    **Owned client**: no client is passed, so ``HttpxTransport`` creates one
    with the given timeout and closes it on ``shutdown`` or when its
    ``with`` block exits.

    .. code-block:: python

        from httpengine.transport import HttpxTransport

        with HttpxTransport(timeout=30.0) as transport:
            request = transport.create_request_factory().build_get_request(
                "https://api.example.com/data"
            )
            response = request.execute()

    Args:
        client: Optional ``httpx.Client`` instance to use for requests.
            If ``None``, a new client is created with ``timeout``.
        timeout: Timeout of the created client. Must be > 0. Ignored when
            ``client`` is provided.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def supports_method(self, method: str) -> bool:
        return method in HTTP_METHODS

    def build_request(self, method: str, url: str) -> HttpxLowLevelRequest:
        return HttpxLowLevelRequest(self._client, method, url)

    def shutdown(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            logger.debug("Closing owned httpx client")
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.shutdown()
