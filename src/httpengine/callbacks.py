r"""Callback types and data structures for observability.

This module lets users hook into the execution lifecycle for logging,
metrics or alerting. Four hooks are available:

- on_request: Called before each physical attempt
- on_retry: Called before each retry, with the trigger that fired
- on_success: Called when a successful response is returned
- on_failure: Called before a fatal error is raised

Callbacks observe the execution; they cannot change retry decisions.
That is the role of the unsuccessful response handler.

Example:
    ```pycon
    >>> from httpengine.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry {retry_info.attempt} ({retry_info.reason})")
    ...
    >>> callbacks = CallbackConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_REASON_BACKOFF",
    "RETRY_REASON_HANDLER",
    "RETRY_REASON_IO_ERROR",
    "RETRY_REASON_REDIRECT",
    "CallbackConfig",
    "CallbackManager",
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpengine.response import HttpResponse

RETRY_REASON_IO_ERROR = "io_error"
RETRY_REASON_HANDLER = "handler"
RETRY_REASON_BACKOFF = "backoff"
RETRY_REASON_REDIRECT = "redirect"


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The current attempt number (1-indexed). First attempt is 1.
        retries_remaining: The retry budget left before this attempt.
    """

    url: str
    method: str
    attempt: int
    retries_remaining: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        url: The URL of the next attempt (after any redirect).
        method: The HTTP method of the next attempt.
        attempt: The number of the next attempt (1-indexed). First retry is
            attempt 2.
        retries_remaining: The retry budget left after this retry.
        reason: The trigger that fired: ``"io_error"``, ``"handler"``,
            ``"backoff"`` or ``"redirect"``.
        wait_time: The backoff pause in seconds (0 for other triggers).
        error: The transport error that triggered the retry (if any).
        status_code: The HTTP status code that triggered the retry (if any).
    """

    url: str
    method: str
    attempt: int
    retries_remaining: int
    reason: str
    wait_time: float
    error: Exception | None
    status_code: int | None


@dataclass
class ResponseInfo:
    """Information passed to on_success callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The attempt number that succeeded (1-indexed).
        response: The successful HTTP response object.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    url: str
    method: str
    attempt: int
    response: HttpResponse
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The final attempt number (1-indexed).
        error: The exception about to be raised.
        status_code: The final HTTP status code (if any).
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    url: str
    method: str
    attempt: int
    error: Exception
    status_code: int | None
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_request: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each retry.
        on_success: Optional callback invoked when request succeeds.
        on_failure: Optional callback invoked before a fatal error is raised.
    """

    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None


class CallbackManager:
    """Invokes the configured callbacks for one execution.

    Args:
        callbacks: The callback configuration, or ``None`` for no callbacks.

    Attributes:
        callbacks: The callback configuration.
        start_time: The timestamp when the execution started.
    """

    def __init__(self, callbacks: CallbackConfig | None) -> None:
        self.callbacks = callbacks or CallbackConfig()
        self.start_time = time.time()

    def on_request(self, url: str, method: str, attempt: int, retries_remaining: int) -> None:
        """Invoke on_request callback.

        Args:
            url: The URL being requested.
            method: The HTTP method.
            attempt: Current attempt number (0-indexed).
            retries_remaining: The retry budget left.
        """
        if self.callbacks.on_request is not None:
            self.callbacks.on_request(
                RequestInfo(
                    url=url,
                    method=method,
                    attempt=attempt + 1,
                    retries_remaining=retries_remaining,
                )
            )

    def on_retry(
        self,
        url: str,
        method: str,
        attempt: int,
        retries_remaining: int,
        reason: str,
        wait_time: float = 0.0,
        error: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        """Invoke on_retry callback.

        Args:
            url: The URL of the next attempt.
            method: The HTTP method of the next attempt.
            attempt: The attempt that failed (0-indexed). The callback
                receives the next attempt number, 1-indexed.
            retries_remaining: The retry budget left after this retry.
            reason: The retry trigger.
            wait_time: The backoff pause in seconds.
            error: The transport error, if any.
            status_code: The HTTP status code, if any.
        """
        if self.callbacks.on_retry is not None:
            self.callbacks.on_retry(
                RetryInfo(
                    url=url,
                    method=method,
                    attempt=attempt + 2,  # Next attempt number
                    retries_remaining=retries_remaining,
                    reason=reason,
                    wait_time=wait_time,
                    error=error,
                    status_code=status_code,
                )
            )

    def on_success(self, url: str, method: str, attempt: int, response: HttpResponse) -> None:
        """Invoke on_success callback.

        Args:
            url: The URL that was requested.
            method: The HTTP method.
            attempt: The attempt that succeeded (0-indexed).
            response: The successful response.
        """
        if self.callbacks.on_success is not None:
            self.callbacks.on_success(
                ResponseInfo(
                    url=url,
                    method=method,
                    attempt=attempt + 1,
                    response=response,
                    total_time=time.time() - self.start_time,
                )
            )

    def on_failure(
        self,
        url: str,
        method: str,
        attempt: int,
        error: Exception,
        status_code: int | None,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            url: The URL that was requested.
            method: The HTTP method.
            attempt: The final attempt (0-indexed).
            error: The exception about to be raised.
            status_code: The final HTTP status code, if any.
        """
        if self.callbacks.on_failure is not None:
            self.callbacks.on_failure(
                FailureInfo(
                    url=url,
                    method=method,
                    attempt=attempt + 1,
                    error=error,
                    status_code=status_code,
                    total_time=time.time() - self.start_time,
                )
            )
