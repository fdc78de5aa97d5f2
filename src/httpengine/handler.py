r"""Unsuccessful response handlers.

An unsuccessful response handler gets the first chance to act on every
unsuccessful response, before the backoff policy and the redirect logic.
It may mutate the request (refresh a credential, rewrite a header, ...)
and returns ``True`` when the request is ready to be retried.

Example:
    ```pycon
    >>> from httpengine.handler import UnsuccessfulResponseHandler
    >>> class RefreshToken(UnsuccessfulResponseHandler):
    ...     def handle_response(self, request, response, supports_retry):
    ...         if response.status_code != 401 or not supports_retry:
    ...             return False
    ...         request.headers.authorization = "Bearer refreshed"
    ...         return True
    ...

    ```
"""

from __future__ import annotations

__all__ = ["CompositeUnsuccessfulResponseHandler", "UnsuccessfulResponseHandler"]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpengine.request import HttpRequest
    from httpengine.response import HttpResponse

logger: logging.Logger = logging.getLogger(__name__)


class UnsuccessfulResponseHandler(ABC):
    """Abstract base class for unsuccessful response handlers."""

    @abstractmethod
    def handle_response(
        self,
        request: HttpRequest,
        response: HttpResponse,
        supports_retry: bool,
    ) -> bool:
        """Handle an unsuccessful response.

        Args:
            request: The request, which the handler may mutate for the
                next attempt.
            response: The unsuccessful response.
            supports_retry: Whether a retry is still possible.

        Returns:
            ``True`` if the handler made the request worth retrying.
        """


class CompositeUnsuccessfulResponseHandler(UnsuccessfulResponseHandler):
    """Handler delegating to several handlers in order.

    The first handler returning ``True`` wins and the remaining ones are
    not called. Requests only hold one handler, so this is how several
    handlers are combined at the call site.

    Args:
        *handlers: The handlers, in the order they are asked.
    """

    def __init__(self, *handlers: UnsuccessfulResponseHandler) -> None:
        self.handlers = handlers

    def handle_response(
        self,
        request: HttpRequest,
        response: HttpResponse,
        supports_retry: bool,
    ) -> bool:
        for handler in self.handlers:
            if handler.handle_response(request, response, supports_retry):
                logger.debug(
                    f"{type(handler).__qualname__} handled status {response.status_code}"
                )
                return True
        return False
