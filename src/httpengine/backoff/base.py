r"""Abstract base class for backoff policies."""

from __future__ import annotations

__all__ = ["STOP", "BackOffPolicy"]

from abc import ABC, abstractmethod

# Value returned by ``get_next_backoff_millis`` when no more retries
# should be attempted
STOP = -1


class BackOffPolicy(ABC):
    """Abstract base class for backoff policies.

    A backoff policy decides whether an unsuccessful response should be
    retried after a pause, and how long that pause is. The executor calls
    ``reset`` once per execution, before the first attempt, and only calls
    ``is_backoff_required`` and ``get_next_backoff_millis`` for
    unsuccessful responses that the unsuccessful response handler did not
    claim.
    """

    @abstractmethod
    def reset(self) -> None:
        """Reset the policy state before a new execution."""

    @abstractmethod
    def is_backoff_required(self, status_code: int) -> bool:
        """Indicate whether a response with this status code should be
        retried after a backoff.

        Args:
            status_code: The HTTP status code of the unsuccessful response.

        Returns:
            ``True`` if the policy handles this status code.
        """

    @abstractmethod
    def get_next_backoff_millis(self) -> int:
        """Compute the pause before the next retry.

        Returns:
            The pause in milliseconds, or ``STOP`` if the policy does not
            want any further retry.
        """
