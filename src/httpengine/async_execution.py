r"""Asynchronous execution of requests on a task runner.

``execute_async`` submits one task running the regular retry loop and
returns a ``ResponseFuture`` immediately. The runner is either a
``concurrent.futures.Executor`` or any callable accepting a
zero-argument task, for example one that queues tasks for later.

Example:
    ```pycon
    >>> from httpengine.async_execution import execute_async
    >>> from httpengine.request import HttpRequest
    >>> from httpengine.transport.mock import MockHttpTransport
    >>> tasks = []
    >>> request = HttpRequest(MockHttpTransport(), "GET", "https://example.com")
    >>> future = execute_async(request, tasks.append)
    >>> future.done()
    False
    >>> tasks[0]()
    >>> future.result(timeout=1).status_code
    200

    ```
"""

from __future__ import annotations

__all__ = ["ResponseFuture", "TaskRunner", "execute_async", "execute_in_event_loop"]

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future
from typing import TYPE_CHECKING, Any, Union

from httpengine.executor import RequestExecutor

if TYPE_CHECKING:
    from httpengine.request import HttpRequest
    from httpengine.response import HttpResponse

logger: logging.Logger = logging.getLogger(__name__)

# Runner accepting the zero-argument task of one execution
TaskRunner = Union[Executor, Callable[[Callable[[], None]], Any]]


class ResponseFuture(Future):
    """Future resolved with the final response of an asynchronous
    execution.

    Cancelling a task that has not started prevents it from running.
    Cancelling a running task sets ``cancel_event``: the execution stops
    before its next attempt or during its current backoff wait, and the
    future then holds a ``CancelledError``. An in-flight transmission is
    not interrupted.

    Attributes:
        cancel_event: The event observed by the running execution.
    """

    def __init__(self) -> None:
        super().__init__()
        self.cancel_event = threading.Event()

    def cancel(self) -> bool:
        self.cancel_event.set()
        return super().cancel()


def execute_async(
    request: HttpRequest,
    runner: TaskRunner,
    executor: RequestExecutor | None = None,
) -> ResponseFuture:
    """Submit the execution of a request to a task runner.

    Exactly one task is submitted. The request must not be used by the
    caller until the returned future is done.

    Args:
        request: The request to execute.
        runner: A ``concurrent.futures.Executor`` (the task is passed to
            ``submit``) or a callable accepting a zero-argument task.
        executor: Optional request executor. Defaults to a new
            ``RequestExecutor``.

    Returns:
        The future resolved with the final response, or with the error
        raised by the execution.
    """
    request_executor = executor or RequestExecutor()
    future = ResponseFuture()

    def task() -> None:
        if not future.set_running_or_notify_cancel():
            logger.debug(f"{request.method} request to {request.url} cancelled before start")
            return
        try:
            response = request_executor.execute(request, cancel_event=future.cancel_event)
        except BaseException as exc:  # noqa: BLE001
            future.set_exception(exc)
            if not isinstance(exc, Exception):
                raise
        else:
            future.set_result(response)

    if isinstance(runner, Executor):
        runner.submit(task)
    else:
        runner(task)
    return future


async def execute_in_event_loop(
    request: HttpRequest, executor: RequestExecutor | None = None
) -> HttpResponse:
    """Execute a request without blocking the running event loop.

    The retry loop runs in the default executor of the running loop.

    Args:
        request: The request to execute.
        executor: Optional request executor. Defaults to a new
            ``RequestExecutor``.

    Returns:
        The final response.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpengine.async_execution import execute_in_event_loop
        >>> from httpengine.request import HttpRequest
        >>> from httpengine.transport.mock import MockHttpTransport
        >>> request = HttpRequest(MockHttpTransport(), "GET", "https://example.com")
        >>> asyncio.run(execute_in_event_loop(request)).status_code
        200

        ```
    """
    request_executor = executor or RequestExecutor()
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, request_executor.execute, request)
