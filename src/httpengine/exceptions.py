r"""Exceptions raised by request execution.

Unsuccessful final responses raise ``HttpResponseError``. Transport I/O
failures are never wrapped: the error raised by the transport reaches
the caller unchanged. ``TRANSPORT_ERRORS`` lists the exception types the
executor treats as transport I/O failures.
"""

from __future__ import annotations

__all__ = ["TRANSPORT_ERRORS", "HttpResponseError"]

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from httpengine.headers import HttpHeaders
    from httpengine.response import HttpResponse

# Exception types raised by transports for failed physical transmissions
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (OSError, httpx.TransportError)

# Maximum number of body characters included in the error message
_MESSAGE_CONTENT_LIMIT = 1024


class HttpResponseError(RuntimeError):
    """Exception raised when a request ends with an unsuccessful
    response.

    Args:
        response: The final unsuccessful response.
        message: Optional message. Defaults to the status line followed by
            an excerpt of the response body.

    Attributes:
        response: The final response.
        status_code: The HTTP status code of the final response.
        reason_phrase: The reason phrase of the final response.
        headers: The headers of the final response.
        content: The body of the final response.
        method: The HTTP method of the final transmission.
        url: The URL of the final transmission.

    Example:
        ```pycon
        >>> from httpengine.exceptions import HttpResponseError
        >>> from httpengine.response import HttpResponse
        >>> response = HttpResponse(
        ...     status_code=404,
        ...     reason_phrase="Not Found",
        ...     request_method="GET",
        ...     request_url="https://example.com/missing",
        ... )
        >>> raise HttpResponseError(response)
        Traceback (most recent call last):
            ...
        httpengine.exceptions.HttpResponseError: 404 Not Found

        ```
    """

    def __init__(self, response: HttpResponse, message: str | None = None) -> None:
        super().__init__(message or self.compute_message(response))
        self.response = response
        self.status_code: int = response.status_code
        self.reason_phrase: str = response.reason_phrase
        self.headers: HttpHeaders = response.headers
        self.content: bytes = response.content
        self.method: str = response.request_method
        self.url: str = response.request_url

    @staticmethod
    def compute_message(response: HttpResponse) -> str:
        """Compute the default error message of a response.

        Args:
            response: The unsuccessful response.

        Returns:
            The status line, followed by the beginning of the body on a
            new line when the body is not empty.
        """
        message = f"{response.status_code} {response.reason_phrase}".rstrip()
        text = response.parse_as_string()
        if text:
            if len(text) > _MESSAGE_CONTENT_LIMIT:
                text = f"{text[:_MESSAGE_CONTENT_LIMIT]}..."
            message = f"{message}\n{text}"
        return message
