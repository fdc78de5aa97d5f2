r"""Transport interfaces.

A transport performs one physical HTTP exchange. The executor builds a
``LowLevelHttpRequest`` through ``HttpTransport.build_request``, adds the
serialized headers and the staged content, and calls ``execute``.
Transports report I/O failures by raising ``OSError`` or
``httpx.TransportError``.
"""

from __future__ import annotations

__all__ = [
    "BASIC_METHODS",
    "HTTP_METHODS",
    "HttpTransport",
    "LowLevelHttpRequest",
    "LowLevelHttpResponse",
]

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from httpengine.content import content_to_bytes

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpengine.content import HttpContent
    from httpengine.factory import HttpRequestFactory
    from httpengine.request import HttpRequest

# Methods every transport must support
BASIC_METHODS = frozenset({"GET", "PUT", "POST", "DELETE"})

# Every method the engine knows; HEAD and PATCH depend on the transport
HTTP_METHODS = frozenset({*BASIC_METHODS, "HEAD", "PATCH"})


@dataclass
class LowLevelHttpResponse:
    """Raw result of one physical exchange.

    Args:
        status_code: The HTTP status code.
        reason_phrase: The HTTP reason phrase.
        headers: The response headers as ``(name, value)`` pairs.
        content: The response body.
    """

    status_code: int
    reason_phrase: str = ""
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: bytes = b""


class LowLevelHttpRequest(ABC):
    """One physical request, prepared by the executor then executed.

    Attributes:
        headers: The ``(name, value)`` header pairs, in the order they were
            added.
        content: The staged content, or ``None``.
    """

    def __init__(self) -> None:
        self.headers: list[tuple[str, str]] = []
        self.content: HttpContent | None = None

    def add_header(self, name: str, value: str) -> None:
        """Add a header pair.

        Args:
            name: The header name.
            value: The header value.
        """
        self.headers.append((name, value))

    def set_content(self, content: HttpContent | None) -> None:
        """Set the content to transmit.

        Args:
            content: The staged content, or ``None`` for no body.
        """
        self.content = content

    def get_header_values(self, name: str) -> list[str]:
        """Return the values of a header, ignoring case.

        Args:
            name: The header name.

        Returns:
            The values, in the order they were added.
        """
        lower = name.lower()
        return [value for key, value in self.headers if key.lower() == lower]

    def get_first_header_value(self, name: str) -> str | None:
        """Return the first value of a header, or ``None``."""
        values = self.get_header_values(name)
        return values[0] if values else None

    @property
    def content_type(self) -> str | None:
        """The media type of the staged content, or ``None``."""
        return None if self.content is None else self.content.media_type

    @property
    def content_encoding(self) -> str | None:
        """The encoding of the staged content, or ``None``."""
        return None if self.content is None else self.content.encoding

    @property
    def content_length(self) -> int:
        """The length of the staged content, ``-1`` if unknown, ``0`` if
        there is no content."""
        return 0 if self.content is None else self.content.length

    def get_content_bytes(self) -> bytes:
        """Write the staged content into memory.

        Returns:
            The wire bytes of the body, empty if there is no content.
        """
        if self.content is None:
            return b""
        return content_to_bytes(self.content)

    @abstractmethod
    def execute(self) -> LowLevelHttpResponse:
        """Perform the exchange.

        Returns:
            The raw response.

        Raises:
            OSError: On I/O failure.
            httpx.TransportError: On I/O failure.
        """


class HttpTransport(ABC):
    """Abstract base class for transports.

    ``GET``, ``PUT``, ``POST`` and ``DELETE`` are always supported. Other
    methods (``HEAD``, ``PATCH``) must be declared by overriding
    ``supports_method``.
    """

    def supports_method(self, method: str) -> bool:
        """Indicate whether the transport supports an HTTP method.

        Args:
            method: The upper-case HTTP method.

        Returns:
            ``True`` for the basic methods.
        """
        return method in BASIC_METHODS

    @abstractmethod
    def build_request(self, method: str, url: str) -> LowLevelHttpRequest:
        """Build a low-level request.

        Args:
            method: The upper-case HTTP method.
            url: The absolute URL.

        Returns:
            A new low-level request.
        """

    def create_request_factory(
        self, initializer: Callable[[HttpRequest], None] | None = None
    ) -> HttpRequestFactory:
        """Create a request factory bound to this transport.

        Args:
            initializer: Optional callable applied to every new request.

        Returns:
            The request factory.
        """
        from httpengine.factory import HttpRequestFactory  # noqa: PLC0415

        return HttpRequestFactory(self, initializer)

    def shutdown(self) -> None:
        """Release the transport resources."""
