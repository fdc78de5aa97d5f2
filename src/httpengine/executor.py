r"""Retry executor for logical HTTP requests.

This module provides the ``RequestExecutor`` class that turns one
``HttpRequest`` into one or more physical transmissions. Every
unsuccessful outcome is offered, in order, to the unsuccessful response
handler, the backoff policy and the redirect logic. All three share the
request retry budget with transport I/O retries.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

import logging
from concurrent.futures import CancelledError
from typing import TYPE_CHECKING

from httpengine.backoff.base import STOP
from httpengine.callbacks import (
    RETRY_REASON_BACKOFF,
    RETRY_REASON_HANDLER,
    RETRY_REASON_IO_ERROR,
    RETRY_REASON_REDIRECT,
    CallbackManager,
)
from httpengine.config import USER_AGENT_SUFFIX
from httpengine.content import GzipContent, LoggingContent
from httpengine.exceptions import TRANSPORT_ERRORS, HttpResponseError
from httpengine.headers import serialize_headers
from httpengine.redirect import handle_redirect
from httpengine.response import HttpResponse
from httpengine.transport.base import HTTP_METHODS
from httpengine.utils.sleep import sleep_millis

if TYPE_CHECKING:
    import threading

    from httpengine.request import HttpRequest
    from httpengine.transport.base import LowLevelHttpRequest

logger: logging.Logger = logging.getLogger(__name__)

# Logger checked to decide whether the request content is logged
_PACKAGE_LOGGER_NAME = "httpengine"

# Headers whose values are replaced in the debug log
_REDACTED_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})


class RequestExecutor:
    """Executes an ``HttpRequest`` with the retry, backoff and redirect
    logic.

    The executor holds no state between calls and can be shared. The
    request is mutated in place: redirects rewrite its URL, method,
    content and headers, and every retry decrements its
    ``number_of_retries``.

    Example:
        ```pycon
        >>> from httpengine.executor import RequestExecutor
        >>> from httpengine.request import HttpRequest
        >>> from httpengine.transport.mock import MockHttpTransport
        >>> request = HttpRequest(MockHttpTransport(), "GET", "https://example.com")
        >>> RequestExecutor().execute(request).status_code
        200

        ```
    """

    def execute(
        self, request: HttpRequest, cancel_event: threading.Event | None = None
    ) -> HttpResponse:
        """Execute a request until it succeeds or no trigger accepts a
        retry.

        The first attempt always happens. After that the loop is bounded
        only by ``request.number_of_retries``, which is decremented once
        per retry whatever the trigger.

        Args:
            request: The request to execute. It is mutated in place.
            cancel_event: Optional event that stops the execution before the
                next attempt or during a backoff wait once set.

        Returns:
            The final response. It is unsuccessful only when
            ``throw_exception_on_execute_error`` is not set.

        Raises:
            ValueError: If the method is unknown or not supported by the
                transport.
            HttpResponseError: If the final response is unsuccessful and
                ``throw_exception_on_execute_error`` is set.
            CancelledError: If ``cancel_event`` is set.
            OSError: On a fatal transport I/O failure, unchanged.
            httpx.TransportError: On a fatal transport I/O failure, unchanged.
        """
        self._validate(request)
        if request.backoff_policy is not None:
            request.backoff_policy.reset()

        callbacks = CallbackManager(request.callbacks)
        attempt = 0
        while True:
            if cancel_event is not None and cancel_event.is_set():
                msg = f"{request.method} request to {request.url} cancelled"
                raise CancelledError(msg)

            low_level_request = self._prepare(request)
            callbacks.on_request(request.url, request.method, attempt, request.number_of_retries)
            error: Exception | None = None
            status_code: int | None = None
            wait_time = 0.0
            try:
                low_level_response = low_level_request.execute()
            except TRANSPORT_ERRORS as exc:
                if not request.retry_on_execute_io_exception or request.number_of_retries == 0:
                    logger.debug(f"{request.method} request to {request.url} failed: {exc}")
                    callbacks.on_failure(request.url, request.method, attempt, exc, None)
                    raise
                reason: str | None = RETRY_REASON_IO_ERROR
                error = exc
            else:
                response = HttpResponse.from_low_level(
                    low_level_response, request.method, request.url
                )
                if response.is_success_status_code:
                    logger.debug(
                        f"{request.method} request to {request.url} succeeded "
                        f"with status {response.status_code}"
                    )
                    callbacks.on_success(request.url, request.method, attempt, response)
                    return response

                status_code = response.status_code
                reason = None
                if request.number_of_retries > 0:
                    reason, wait_time = self._handle_unsuccessful(request, response, cancel_event)
                if reason is None:
                    return self._terminate(request, response, callbacks, attempt)

            request.number_of_retries -= 1
            logger.debug(
                f"{request.method} request to {request.url} retried "
                f"({reason}, {request.number_of_retries} retries left)"
            )
            callbacks.on_retry(
                request.url,
                request.method,
                attempt,
                request.number_of_retries,
                reason,
                wait_time=wait_time,
                error=error,
                status_code=status_code,
            )
            attempt += 1

    def _validate(self, request: HttpRequest) -> None:
        if request.method not in HTTP_METHODS:
            msg = f"Unknown HTTP method: {request.method}"
            raise ValueError(msg)
        if request.method in {"HEAD", "PATCH"} and not request.transport.supports_method(
            request.method
        ):
            msg = f"{request.method} is not supported by {type(request.transport).__qualname__}"
            raise ValueError(msg)

    def _prepare(self, request: HttpRequest) -> LowLevelHttpRequest:
        """Build the low-level request of one attempt.

        Args:
            request: The logical request.

        Returns:
            The low-level request with its headers and content staged.
        """
        low_level_request = request.transport.build_request(request.method, request.url)
        suffix = None if request.suppress_user_agent_suffix else USER_AGENT_SUFFIX
        for name, value in serialize_headers(request.headers, suffix):
            low_level_request.add_header(name, value)

        content = request.content
        if content is not None:
            if (
                request.logging_enabled
                and logging.getLogger(_PACKAGE_LOGGER_NAME).isEnabledFor(logging.DEBUG)
            ):
                content = LoggingContent(content, request.content_logging_limit)
            if request.enable_gzip_content:
                content = GzipContent(content)
        low_level_request.set_content(content)

        if request.logging_enabled:
            logger.debug(f"{request.method} request to {request.url}")
            for name, value in low_level_request.headers:
                shown = "<Not Logged>" if name.lower() in _REDACTED_HEADERS else value
                logger.debug(f"  {name}: {shown}")
        return low_level_request

    def _handle_unsuccessful(
        self,
        request: HttpRequest,
        response: HttpResponse,
        cancel_event: threading.Event | None,
    ) -> tuple[str | None, float]:
        """Offer an unsuccessful response to each retry trigger in turn.

        Args:
            request: The logical request.
            response: The unsuccessful response.
            cancel_event: Optional event interrupting the backoff wait.

        Returns:
            The reason of the trigger that accepted the retry, or ``None``,
            and the backoff wait in seconds.
        """
        handler = request.unsuccessful_response_handler
        if handler is not None and handler.handle_response(request, response, supports_retry=True):
            return RETRY_REASON_HANDLER, 0.0

        policy = request.backoff_policy
        if policy is not None and policy.is_backoff_required(response.status_code):
            millis = policy.get_next_backoff_millis()
            if millis != STOP:
                sleep_millis(millis, cancel_event)
                return RETRY_REASON_BACKOFF, millis / 1000.0

        if handle_redirect(request, response.status_code, response.headers):
            return RETRY_REASON_REDIRECT, 0.0
        return None, 0.0

    def _terminate(
        self,
        request: HttpRequest,
        response: HttpResponse,
        callbacks: CallbackManager,
        attempt: int,
    ) -> HttpResponse:
        if not request.throw_exception_on_execute_error:
            return response
        error = HttpResponseError(response)
        logger.debug(f"{request.method} request to {request.url} failed: {error}")
        callbacks.on_failure(request.url, request.method, attempt, error, response.status_code)
        raise error
