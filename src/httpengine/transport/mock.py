r"""In-memory transport doubles for testing code built on the engine.

Example:
    ```pycon
    >>> from httpengine.transport.mock import MockHttpTransport, MockLowLevelHttpResponse
    >>> transport = MockHttpTransport(
    ...     low_level_response=MockLowLevelHttpResponse(status_code=201).set_content("created")
    ... )
    >>> request = transport.create_request_factory().build_post_request("https://example.com")
    >>> response = request.execute()
    >>> response.status_code, response.parse_as_string()
    (201, 'created')
    >>> transport.requests[0].method
    'POST'

    ```
"""

from __future__ import annotations

__all__ = ["MockHttpTransport", "MockLowLevelHttpRequest", "MockLowLevelHttpResponse"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from httpengine.transport.base import (
    HttpTransport,
    LowLevelHttpRequest,
    LowLevelHttpResponse,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Self


@dataclass
class MockLowLevelHttpResponse(LowLevelHttpResponse):
    """Low-level response with chainable setters."""

    status_code: int = 200

    def add_header(self, name: str, value: str) -> Self:
        self.headers.append((name, value))
        return self

    def set_content(self, content: str | bytes) -> Self:
        self.content = content.encode("utf-8") if isinstance(content, str) else content
        return self

    def set_content_type(self, content_type: str) -> Self:
        return self.add_header("Content-Type", content_type)


class MockLowLevelHttpRequest(LowLevelHttpRequest):
    """Low-level request returning a fixed response.

    Args:
        method: The HTTP method, set by the transport when built.
        url: The URL, set by the transport when built.
        response: The response returned by ``execute``. Defaults to an
            empty ``200`` response.
    """

    def __init__(
        self,
        method: str | None = None,
        url: str | None = None,
        response: LowLevelHttpResponse | None = None,
    ) -> None:
        super().__init__()
        self.method = method
        self.url = url
        self.response = response or MockLowLevelHttpResponse()
        self.execute_calls = 0

    def execute(self) -> LowLevelHttpResponse:
        self.execute_calls += 1
        return self.response


class MockHttpTransport(HttpTransport):
    """Transport returning canned responses.

    Args:
        supported_methods: The methods supported on top of the basic ones,
            or ``None`` to support every method.
        low_level_request: Optional request returned by every
            ``build_request`` call, after its method and URL are updated
            and its headers and content cleared.
        low_level_response: Optional response used by the requests built
            when ``low_level_request`` is not set.

    Attributes:
        requests: Every low-level request built, in order.
    """

    def __init__(
        self,
        supported_methods: Iterable[str] | None = None,
        low_level_request: MockLowLevelHttpRequest | None = None,
        low_level_response: LowLevelHttpResponse | None = None,
    ) -> None:
        self.supported_methods = None if supported_methods is None else frozenset(supported_methods)
        self.low_level_request = low_level_request
        self.low_level_response = low_level_response
        self.requests: list[MockLowLevelHttpRequest] = []

    def supports_method(self, method: str) -> bool:
        if self.supported_methods is None:
            return True
        return super().supports_method(method) or method in self.supported_methods

    def build_request(self, method: str, url: str) -> MockLowLevelHttpRequest:
        if self.low_level_request is not None:
            request = self.low_level_request
            request.method = method
            request.url = url
            request.headers = []
            request.content = None
        else:
            request = MockLowLevelHttpRequest(method, url, self.low_level_response)
        self.requests.append(request)
        return request
