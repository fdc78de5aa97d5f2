r"""Immutable snapshot of one physical transmission's outcome."""

from __future__ import annotations

__all__ = ["HttpResponse"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from httpengine.content import get_charset, normalize_media_type
from httpengine.headers import HttpHeaders
from httpengine.status import is_success

if TYPE_CHECKING:
    from httpengine.transport.base import LowLevelHttpResponse


@dataclass(frozen=True)
class HttpResponse:
    """HTTP response of one transmission.

    Args:
        status_code: The HTTP status code.
        reason_phrase: The HTTP reason phrase.
        headers: The response headers.
        content: The response body.
        request_method: The method of the transmission that produced the
            response.
        request_url: The URL of the transmission that produced the
            response.

    Example:
        ```pycon
        >>> from httpengine.headers import HttpHeaders
        >>> from httpengine.response import HttpResponse
        >>> response = HttpResponse(
        ...     status_code=200,
        ...     headers=HttpHeaders.from_pairs([("Content-Type", "text/plain")]),
        ...     content=b"hello",
        ... )
        >>> response.is_success_status_code
        True
        >>> response.parse_as_string()
        'hello'

        ```
    """

    status_code: int
    reason_phrase: str = ""
    headers: HttpHeaders = field(default_factory=lambda: HttpHeaders(accept_encoding=None))
    content: bytes = b""
    request_method: str = "GET"
    request_url: str = ""

    @classmethod
    def from_low_level(
        cls, low_level: LowLevelHttpResponse, method: str, url: str
    ) -> HttpResponse:
        """Wrap the result of a transport call.

        Args:
            low_level: The transport response.
            method: The method of the transmission.
            url: The URL of the transmission.

        Returns:
            The response snapshot.
        """
        return cls(
            status_code=low_level.status_code,
            reason_phrase=low_level.reason_phrase,
            headers=HttpHeaders.from_pairs(low_level.headers),
            content=low_level.content,
            request_method=method,
            request_url=url,
        )

    @property
    def is_success_status_code(self) -> bool:
        """Whether the status code is a success (2xx) code."""
        return is_success(self.status_code)

    @property
    def content_type(self) -> str | None:
        """The ``Content-Type`` header value, or ``None``."""
        return self.headers.content_type

    @property
    def content_encoding(self) -> str | None:
        """The ``Content-Encoding`` header value, or ``None``."""
        return self.headers.content_encoding

    @property
    def media_type(self) -> str | None:
        """The content type without its parameters, or ``None``."""
        return normalize_media_type(self.content_type)

    def parse_as_string(self) -> str:
        """Decode the body with the charset of the content type.

        Returns:
            The decoded body, UTF-8 when no charset is declared or the
            declared charset is unknown.
        """
        try:
            return self.content.decode(get_charset(self.content_type), errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")
