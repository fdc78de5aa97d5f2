r"""Constant backoff policy."""

from __future__ import annotations

__all__ = ["ConstantBackOffPolicy"]

from httpengine.backoff.base import STOP, BackOffPolicy

# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
DEFAULT_STATUS_CODES = (429, 500, 502, 503, 504)


class ConstantBackOffPolicy(BackOffPolicy):
    """Constant/fixed backoff policy.

    Returns the same pause for every retry. When ``max_attempts`` is set,
    the policy returns ``STOP`` once it has granted that many backoffs
    since the last ``reset``.

    Args:
        delay_millis: The fixed pause in milliseconds (default: 1000).
        max_attempts: Optional maximum number of backoffs per execution.
        status_codes: The status codes that require a backoff.

    Example:
        ```pycon
        >>> from httpengine.backoff import STOP, ConstantBackOffPolicy
        >>> policy = ConstantBackOffPolicy(delay_millis=250, max_attempts=2)
        >>> policy.reset()
        >>> policy.get_next_backoff_millis()
        250
        >>> policy.get_next_backoff_millis()
        250
        >>> policy.get_next_backoff_millis() == STOP
        True

        ```
    """

    def __init__(
        self,
        delay_millis: int = 1000,
        max_attempts: int | None = None,
        status_codes: tuple[int, ...] = DEFAULT_STATUS_CODES,
    ) -> None:
        if delay_millis < 0:
            msg = f"delay_millis must be non-negative, got {delay_millis}"
            raise ValueError(msg)
        if max_attempts is not None and max_attempts < 0:
            msg = f"max_attempts must be non-negative if specified, got {max_attempts}"
            raise ValueError(msg)

        self.delay_millis = delay_millis
        self.max_attempts = max_attempts
        self.status_codes = status_codes
        self.attempts = 0

    def reset(self) -> None:
        self.attempts = 0

    def is_backoff_required(self, status_code: int) -> bool:
        return status_code in self.status_codes

    def get_next_backoff_millis(self) -> int:
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            return STOP
        self.attempts += 1
        return self.delay_millis
