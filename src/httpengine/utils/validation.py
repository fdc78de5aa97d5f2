r"""Parameter validation utilities for request execution.

This module provides validation functions for the execution parameters
of a request to ensure they meet the required constraints before any
transmission is attempted.
"""

from __future__ import annotations

__all__ = ["validate_execution_params", "validate_non_negative", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is not negative.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is negative.

    Example:
        ```pycon
        >>> from httpengine.utils.validation import validate_non_negative
        >>> validate_non_negative("number_of_retries", 3)
        >>> validate_non_negative("number_of_retries", -1)
        Traceback (most recent call last):
        ...
        ValueError: number_of_retries must be >= 0, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from httpengine.utils.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_execution_params(
    number_of_retries: int,
    content_logging_limit: int,
) -> None:
    """Validate the execution parameters shared by requests and
    request configs.

    Args:
        number_of_retries: The retry budget. Must be >= 0. A value of 0
            means only the initial attempt is made.
        content_logging_limit: Maximum number of content bytes to log.
            Must be >= 0. A value of 0 disables content logging.

    Raises:
        ValueError: If any parameter is negative.

    Example:
        ```pycon
        >>> from httpengine.utils.validation import validate_execution_params
        >>> validate_execution_params(number_of_retries=10, content_logging_limit=16384)

        ```
    """
    validate_non_negative("number_of_retries", number_of_retries)
    validate_non_negative("content_logging_limit", content_logging_limit)
