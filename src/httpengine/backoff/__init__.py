r"""Backoff policies deciding whether and how long to pause before a
retry.

This package provides the ``BackOffPolicy`` interface, the ``STOP``
sentinel and the exponential and constant policies.
"""

from __future__ import annotations

__all__ = [
    "STOP",
    "BackOffPolicy",
    "ConstantBackOffPolicy",
    "ExponentialBackOffPolicy",
]

from httpengine.backoff.base import STOP, BackOffPolicy
from httpengine.backoff.constant import ConstantBackOffPolicy
from httpengine.backoff.exponential import ExponentialBackOffPolicy
