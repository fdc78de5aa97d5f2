r"""Shared test helpers for request execution tests.

This module contains a scripted transport used across multiple test
files to drive the retry loop through a known sequence of outcomes.
"""

from __future__ import annotations

__all__ = [
    "TEST_URL",
    "ScriptedHttpTransport",
    "ScriptedLowLevelHttpRequest",
    "create_low_level_response",
]

from typing import TYPE_CHECKING

from httpengine.transport import (
    LowLevelHttpResponse,
    MockHttpTransport,
    MockLowLevelHttpRequest,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

TEST_URL = "https://api.example.com/data"


def create_low_level_response(
    status_code: int = 200,
    headers: Iterable[tuple[str, str]] = (),
    content: bytes = b"",
    reason_phrase: str = "",
) -> LowLevelHttpResponse:
    """Create a low-level response for testing.

    Args:
        status_code: The HTTP status code.
        headers: The response header pairs.
        content: The response body.
        reason_phrase: The reason phrase.

    Returns:
        The low-level response.
    """
    return LowLevelHttpResponse(
        status_code=status_code,
        reason_phrase=reason_phrase,
        headers=list(headers),
        content=content,
    )


class ScriptedLowLevelHttpRequest(MockLowLevelHttpRequest):
    """Low-level request taking its outcome from the transport script."""

    def __init__(self, transport: ScriptedHttpTransport, method: str, url: str) -> None:
        super().__init__(method, url)
        self.transport = transport

    def execute(self) -> LowLevelHttpResponse:
        self.execute_calls += 1
        return self.transport.next_outcome()


class ScriptedHttpTransport(MockHttpTransport):
    """Transport returning or raising a scripted sequence of outcomes.

    Each outcome is a ``LowLevelHttpResponse`` to return or an exception
    to raise. The last outcome is repeated once the script is exhausted.

    Args:
        outcomes: The outcomes, in order.
        supported_methods: The methods supported on top of the basic ones,
            or ``None`` to support every method.

    Attributes:
        calls: The number of executed transmissions.
    """

    def __init__(
        self,
        outcomes: Iterable[LowLevelHttpResponse | Exception],
        supported_methods: Iterable[str] | None = None,
    ) -> None:
        super().__init__(supported_methods=supported_methods)
        self.outcomes = list(outcomes)
        self.calls = 0

    def build_request(self, method: str, url: str) -> ScriptedLowLevelHttpRequest:
        request = ScriptedLowLevelHttpRequest(self, method, url)
        self.requests.append(request)
        return request

    def next_outcome(self) -> LowLevelHttpResponse:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
