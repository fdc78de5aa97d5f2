r"""Exponential backoff policy."""

from __future__ import annotations

__all__ = ["ExponentialBackOffPolicy"]

import logging
import random
import time

from httpengine.backoff.base import STOP, BackOffPolicy
from httpengine.status import STATUS_CODE_SERVER_ERROR, STATUS_CODE_SERVICE_UNAVAILABLE

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_INITIAL_INTERVAL_MILLIS = 500
DEFAULT_RANDOMIZATION_FACTOR = 0.5
DEFAULT_MULTIPLIER = 1.5
DEFAULT_MAX_INTERVAL_MILLIS = 60000
DEFAULT_MAX_ELAPSED_TIME_MILLIS = 900000


class ExponentialBackOffPolicy(BackOffPolicy):
    """Exponential backoff policy with randomization.

    The retry interval starts at ``initial_interval_millis`` and is
    multiplied by ``multiplier`` after every backoff, capped at
    ``max_interval_millis``. Each returned pause is picked uniformly in
    ``[interval * (1 - randomization_factor), interval * (1 + randomization_factor)]``.
    Once the time elapsed since ``reset`` exceeds
    ``max_elapsed_time_millis`` the policy returns ``STOP``.

    With the default parameters the successive intervals are 500, 750,
    1125, 1688, ... milliseconds, before randomization.

    Args:
        initial_interval_millis: The first retry interval. Must be > 0.
        randomization_factor: The randomization factor. Must be in
            ``[0, 1)``.
        multiplier: The interval multiplier. Must be >= 1.
        max_interval_millis: The interval cap. Must be >=
            ``initial_interval_millis``.
        max_elapsed_time_millis: The elapsed time after which the policy
            stops. Must be > 0.
        status_codes: The status codes that require a backoff.
            Defaults to 500 and 503.

    Example:
        ```pycon
        >>> from httpengine.backoff import ExponentialBackOffPolicy
        >>> policy = ExponentialBackOffPolicy(randomization_factor=0.0)
        >>> policy.reset()
        >>> policy.is_backoff_required(503)
        True
        >>> policy.is_backoff_required(404)
        False
        >>> policy.get_next_backoff_millis()
        500
        >>> policy.get_next_backoff_millis()
        750

        ```
    """

    def __init__(
        self,
        initial_interval_millis: int = DEFAULT_INITIAL_INTERVAL_MILLIS,
        randomization_factor: float = DEFAULT_RANDOMIZATION_FACTOR,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_interval_millis: int = DEFAULT_MAX_INTERVAL_MILLIS,
        max_elapsed_time_millis: int = DEFAULT_MAX_ELAPSED_TIME_MILLIS,
        status_codes: tuple[int, ...] = (
            STATUS_CODE_SERVER_ERROR,
            STATUS_CODE_SERVICE_UNAVAILABLE,
        ),
    ) -> None:
        if initial_interval_millis <= 0:
            msg = f"initial_interval_millis must be positive, got {initial_interval_millis}"
            raise ValueError(msg)
        if not 0 <= randomization_factor < 1:
            msg = f"randomization_factor must be in [0, 1), got {randomization_factor}"
            raise ValueError(msg)
        if multiplier < 1:
            msg = f"multiplier must be >= 1, got {multiplier}"
            raise ValueError(msg)
        if max_interval_millis < initial_interval_millis:
            msg = (
                f"max_interval_millis must be >= initial_interval_millis "
                f"({initial_interval_millis}), got {max_interval_millis}"
            )
            raise ValueError(msg)
        if max_elapsed_time_millis <= 0:
            msg = f"max_elapsed_time_millis must be positive, got {max_elapsed_time_millis}"
            raise ValueError(msg)

        self.initial_interval_millis = initial_interval_millis
        self.randomization_factor = randomization_factor
        self.multiplier = multiplier
        self.max_interval_millis = max_interval_millis
        self.max_elapsed_time_millis = max_elapsed_time_millis
        self.status_codes = status_codes

        self.current_interval_millis = initial_interval_millis
        self.start_time = time.monotonic()

    def reset(self) -> None:
        self.current_interval_millis = self.initial_interval_millis
        self.start_time = time.monotonic()

    def is_backoff_required(self, status_code: int) -> bool:
        return status_code in self.status_codes

    @property
    def elapsed_time_millis(self) -> int:
        """The time elapsed since the last ``reset``, in milliseconds."""
        return int((time.monotonic() - self.start_time) * 1000)

    def get_next_backoff_millis(self) -> int:
        """Compute the next randomized interval and increase the current
        interval.

        Returns:
            The pause in milliseconds, or ``STOP`` once the maximum
            elapsed time is exceeded.
        """
        if self.elapsed_time_millis > self.max_elapsed_time_millis:
            logger.debug(
                f"Exponential backoff stopped after {self.elapsed_time_millis}ms "
                f"(max_elapsed_time_millis={self.max_elapsed_time_millis})"
            )
            return STOP
        delta = self.randomization_factor * self.current_interval_millis
        interval = int(
            random.uniform(  # noqa: S311
                self.current_interval_millis - delta, self.current_interval_millis + delta
            )
        )
        self._increment_current_interval()
        return interval

    def _increment_current_interval(self) -> None:
        if self.current_interval_millis >= self.max_interval_millis / self.multiplier:
            self.current_interval_millis = self.max_interval_millis
        else:
            self.current_interval_millis = int(self.current_interval_millis * self.multiplier)
