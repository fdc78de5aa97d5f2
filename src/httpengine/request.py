r"""Logical HTTP request: configuration and execution state.

An ``HttpRequest`` is owned by the caller until ``execute`` returns.
During execution the executor mutates it in place: redirects rewrite
``url``, ``method``, ``content`` and ``headers``, and every retry
decrements ``number_of_retries``.

Example:
    ```pycon
    >>> from httpengine.request import HttpRequest
    >>> from httpengine.transport.mock import MockHttpTransport
    >>> request = HttpRequest(MockHttpTransport(), "get", "https://example.com")
    >>> request.method
    'GET'
    >>> request.number_of_retries
    10
    >>> request.execute().status_code
    200

    ```
"""

from __future__ import annotations

__all__ = ["HTTP_METHODS", "HttpRequest"]

from typing import TYPE_CHECKING

from httpengine.async_execution import execute_async
from httpengine.config import DEFAULT_CONTENT_LOGGING_LIMIT, DEFAULT_NUMBER_OF_RETRIES
from httpengine.executor import RequestExecutor
from httpengine.headers import HttpHeaders
from httpengine.transport.base import HTTP_METHODS
from httpengine.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from httpengine.async_execution import ResponseFuture, TaskRunner
    from httpengine.backoff import BackOffPolicy
    from httpengine.callbacks import CallbackConfig
    from httpengine.content import HttpContent
    from httpengine.handler import UnsuccessfulResponseHandler
    from httpengine.response import HttpResponse
    from httpengine.transport.base import HttpTransport


class HttpRequest:
    """HTTP request with its retry, redirect and transmission settings.

    Args:
        transport: The transport performing the exchanges.
        method: The HTTP method, case-insensitive.
        url: The absolute URL.
        content: Optional re-readable request body.
        headers: Optional headers. Defaults to a new ``HttpHeaders``.
        number_of_retries: The retry budget shared by every retry trigger.
            Must be >= 0.
        backoff_policy: Optional backoff policy. ``None`` disables backoff.
        unsuccessful_response_handler: Optional handler given the first
            chance to act on unsuccessful responses.
        follow_redirects: Whether redirect responses are followed.
        retry_on_execute_io_exception: Whether transport I/O failures are
            retried.
        throw_exception_on_execute_error: Whether an unsuccessful final
            response raises ``HttpResponseError`` instead of being returned.
        suppress_user_agent_suffix: Whether the engine user agent suffix is
            omitted from the ``User-Agent`` header.
        enable_gzip_content: Whether the content is gzip encoded on the wire.
        content_logging_limit: Maximum number of content bytes written to the
            debug log. Must be >= 0. ``0`` disables content logging.
        logging_enabled: Whether the request is logged.
        callbacks: Optional lifecycle callbacks.
    """

    def __init__(
        self,
        transport: HttpTransport,
        method: str = "GET",
        url: str = "",
        content: HttpContent | None = None,
        headers: HttpHeaders | None = None,
        *,
        number_of_retries: int = DEFAULT_NUMBER_OF_RETRIES,
        backoff_policy: BackOffPolicy | None = None,
        unsuccessful_response_handler: UnsuccessfulResponseHandler | None = None,
        follow_redirects: bool = True,
        retry_on_execute_io_exception: bool = False,
        throw_exception_on_execute_error: bool = True,
        suppress_user_agent_suffix: bool = False,
        enable_gzip_content: bool = False,
        content_logging_limit: int = DEFAULT_CONTENT_LOGGING_LIMIT,
        logging_enabled: bool = True,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        self.transport = transport
        self.method = method
        self.url = url
        self.content = content
        self.headers = headers if headers is not None else HttpHeaders()
        self.number_of_retries = number_of_retries
        self.backoff_policy = backoff_policy
        self.unsuccessful_response_handler = unsuccessful_response_handler
        self.follow_redirects = follow_redirects
        self.retry_on_execute_io_exception = retry_on_execute_io_exception
        self.throw_exception_on_execute_error = throw_exception_on_execute_error
        self.suppress_user_agent_suffix = suppress_user_agent_suffix
        self.enable_gzip_content = enable_gzip_content
        self.content_logging_limit = content_logging_limit
        self.logging_enabled = logging_enabled
        self.callbacks = callbacks

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r})"

    @property
    def method(self) -> str:
        """The upper-case HTTP method."""
        return self._method

    @method.setter
    def method(self, method: str) -> None:
        self._method = method.upper()

    @property
    def number_of_retries(self) -> int:
        """The retry budget. Decremented by every retry."""
        return self._number_of_retries

    @number_of_retries.setter
    def number_of_retries(self, number_of_retries: int) -> None:
        validate_non_negative("number_of_retries", number_of_retries)
        self._number_of_retries = number_of_retries

    @property
    def content_logging_limit(self) -> int:
        """Maximum number of content bytes written to the debug log."""
        return self._content_logging_limit

    @content_logging_limit.setter
    def content_logging_limit(self, content_logging_limit: int) -> None:
        validate_non_negative("content_logging_limit", content_logging_limit)
        self._content_logging_limit = content_logging_limit

    def execute(self) -> HttpResponse:
        """Execute the request with the retry, backoff and redirect logic.

        Returns:
            The final response.

        Raises:
            ValueError: If the request is misconfigured.
            HttpResponseError: If the final response is unsuccessful and
                ``throw_exception_on_execute_error`` is set.
            OSError: On a fatal transport I/O failure, unchanged.
            httpx.TransportError: On a fatal transport I/O failure, unchanged.
        """
        return RequestExecutor().execute(self)

    def execute_async(
        self, runner: TaskRunner, executor: RequestExecutor | None = None
    ) -> ResponseFuture:
        """Submit the execution to a task runner.

        Args:
            runner: A ``concurrent.futures.Executor`` or a callable
                accepting a zero-argument task.
            executor: Optional request executor.

        Returns:
            A future resolved with the final response.
        """
        return execute_async(self, runner, executor)

