r"""Factory building requests bound to a transport.

Example:
    ```pycon
    >>> from httpengine.config import RequestConfig
    >>> from httpengine.factory import HttpRequestFactory
    >>> from httpengine.transport.mock import MockHttpTransport
    >>> factory = HttpRequestFactory(
    ...     MockHttpTransport(), initializer=RequestConfig(number_of_retries=3).apply_to
    ... )
    >>> request = factory.build_get_request("https://example.com")
    >>> request.method, request.number_of_retries
    ('GET', 3)

    ```
"""

from __future__ import annotations

__all__ = ["HttpRequestFactory"]

from typing import TYPE_CHECKING

from httpengine.request import HttpRequest

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpengine.content import HttpContent
    from httpengine.transport.base import HttpTransport


class HttpRequestFactory:
    """Build ``HttpRequest`` objects for one transport.

    Args:
        transport: The transport used by every request built.
        initializer: Optional callable applied to every new request, for
            example to set shared headers or a ``RequestConfig``.
    """

    def __init__(
        self,
        transport: HttpTransport,
        initializer: Callable[[HttpRequest], object] | None = None,
    ) -> None:
        self.transport = transport
        self.initializer = initializer

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(transport={self.transport!r})"

    def build_request(
        self, method: str, url: str, content: HttpContent | None = None
    ) -> HttpRequest:
        """Build a request and run the initializer on it.

        Args:
            method: The HTTP method.
            url: The absolute URL.
            content: Optional request body.

        Returns:
            The new request.
        """
        request = HttpRequest(self.transport, method, url, content)
        if self.initializer is not None:
            self.initializer(request)
        return request

    def build_get_request(self, url: str) -> HttpRequest:
        """Build a ``GET`` request."""
        return self.build_request("GET", url)

    def build_post_request(self, url: str, content: HttpContent | None = None) -> HttpRequest:
        """Build a ``POST`` request."""
        return self.build_request("POST", url, content)

    def build_put_request(self, url: str, content: HttpContent | None = None) -> HttpRequest:
        """Build a ``PUT`` request."""
        return self.build_request("PUT", url, content)

    def build_delete_request(self, url: str) -> HttpRequest:
        """Build a ``DELETE`` request."""
        return self.build_request("DELETE", url)

    def build_head_request(self, url: str) -> HttpRequest:
        """Build a ``HEAD`` request."""
        return self.build_request("HEAD", url)

    def build_patch_request(self, url: str, content: HttpContent | None = None) -> HttpRequest:
        """Build a ``PATCH`` request."""
        return self.build_request("PATCH", url, content)
