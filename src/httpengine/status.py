r"""HTTP status code constants and classification helpers.

The helpers are pure functions of the status code: they hold no state and
are shared by the response object, the redirect logic and the backoff
policies.

Example:
    ```pycon
    >>> from httpengine.status import is_redirect, is_success
    >>> is_success(204)
    True
    >>> is_redirect(303)
    True
    >>> is_redirect(304)
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "REDIRECT_STATUS_CODES",
    "STATUS_CODE_BAD_GATEWAY",
    "STATUS_CODE_FORBIDDEN",
    "STATUS_CODE_FOUND",
    "STATUS_CODE_GATEWAY_TIMEOUT",
    "STATUS_CODE_MOVED_PERMANENTLY",
    "STATUS_CODE_NOT_FOUND",
    "STATUS_CODE_NO_CONTENT",
    "STATUS_CODE_OK",
    "STATUS_CODE_PERMANENT_REDIRECT",
    "STATUS_CODE_SEE_OTHER",
    "STATUS_CODE_SERVER_ERROR",
    "STATUS_CODE_SERVICE_UNAVAILABLE",
    "STATUS_CODE_TEMPORARY_REDIRECT",
    "STATUS_CODE_TOO_MANY_REQUESTS",
    "STATUS_CODE_UNAUTHORIZED",
    "is_redirect",
    "is_success",
]

STATUS_CODE_OK = 200
STATUS_CODE_NO_CONTENT = 204
STATUS_CODE_MOVED_PERMANENTLY = 301
STATUS_CODE_FOUND = 302
STATUS_CODE_SEE_OTHER = 303
STATUS_CODE_TEMPORARY_REDIRECT = 307
STATUS_CODE_PERMANENT_REDIRECT = 308
STATUS_CODE_UNAUTHORIZED = 401
STATUS_CODE_FORBIDDEN = 403
STATUS_CODE_NOT_FOUND = 404
STATUS_CODE_TOO_MANY_REQUESTS = 429
STATUS_CODE_SERVER_ERROR = 500
STATUS_CODE_BAD_GATEWAY = 502
STATUS_CODE_SERVICE_UNAVAILABLE = 503
STATUS_CODE_GATEWAY_TIMEOUT = 504

# Status codes whose Location header is followed automatically
REDIRECT_STATUS_CODES = frozenset(
    {
        STATUS_CODE_MOVED_PERMANENTLY,
        STATUS_CODE_FOUND,
        STATUS_CODE_SEE_OTHER,
        STATUS_CODE_TEMPORARY_REDIRECT,
        STATUS_CODE_PERMANENT_REDIRECT,
    }
)


def is_success(status_code: int) -> bool:
    """Indicate whether the status code is a success (2xx) code.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` if ``200 <= status_code < 300``, otherwise ``False``.
    """
    return 200 <= status_code < 300


def is_redirect(status_code: int) -> bool:
    """Indicate whether the status code is a followable redirect code.

    ``304 Not Modified`` is not a followable redirect: it carries no
    new location.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` if the status code is in ``REDIRECT_STATUS_CODES``.
    """
    return status_code in REDIRECT_STATUS_CODES
