r"""Utility functions for request execution.

This package provides helper functions for parameter validation and
cancellable waits between retries.
"""

from __future__ import annotations

__all__ = [
    "sleep_millis",
    "validate_execution_params",
    "validate_non_negative",
    "validate_timeout",
]

from httpengine.utils.sleep import sleep_millis
from httpengine.utils.validation import (
    validate_execution_params,
    validate_non_negative,
    validate_timeout,
)
