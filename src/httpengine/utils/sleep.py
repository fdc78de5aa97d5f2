r"""Blocking and cancellable waits between retry attempts."""

from __future__ import annotations

__all__ = ["sleep_millis"]

import logging
import time
from concurrent.futures import CancelledError
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import threading

logger: logging.Logger = logging.getLogger(__name__)


def sleep_millis(millis: int, cancel_event: threading.Event | None = None) -> None:
    """Suspend the calling thread before the next retry attempt.

    Without a cancel event the wait is a plain ``time.sleep``. With a
    cancel event the wait returns early when the event is set, and
    ``CancelledError`` is raised so no further attempt is made.

    Args:
        millis: The wait duration in milliseconds.
        cancel_event: Optional event signalling that the caller cancelled
            the execution.

    Raises:
        CancelledError: If ``cancel_event`` is set before or during the wait.

    Example:
        ```pycon
        >>> from httpengine.utils.sleep import sleep_millis
        >>> sleep_millis(0)

        ```
    """
    seconds = millis / 1000.0
    logger.debug(f"Waiting {seconds:.3f}s before retry")
    if cancel_event is None:
        time.sleep(seconds)
        return
    if cancel_event.wait(seconds):
        msg = "execution cancelled while waiting to retry"
        raise CancelledError(msg)
