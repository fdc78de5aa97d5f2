r"""Redirect resolution.

This module computes the target of a redirect response and rewrites the
request for the next attempt: new URL, method downgrade on ``303 See
Other`` for ``POST``, and removal of the headers that were only valid for
the previous target.

Example:
    ```pycon
    >>> from httpengine.redirect import resolve_location
    >>> resolve_location("http://some.org/a/b", "z")
    'http://some.org/a/z'
    >>> resolve_location("http://some.org/a/b", "/z")
    'http://some.org/z'
    >>> resolve_location("http://some.org/a/b", "http://other.org/c")
    'http://other.org/c'

    ```
"""

from __future__ import annotations

__all__ = ["STRIPPED_REDIRECT_HEADERS", "handle_redirect", "resolve_location"]

import logging
from typing import TYPE_CHECKING

import httpx

from httpengine.headers import (
    AUTHORIZATION,
    IF_MATCH,
    IF_MODIFIED_SINCE,
    IF_NONE_MATCH,
    IF_RANGE,
    IF_UNMODIFIED_SINCE,
)
from httpengine.status import STATUS_CODE_SEE_OTHER, is_redirect

if TYPE_CHECKING:
    from httpengine.headers import HttpHeaders
    from httpengine.request import HttpRequest

logger: logging.Logger = logging.getLogger(__name__)

# Request headers removed before following a redirect
STRIPPED_REDIRECT_HEADERS = (
    AUTHORIZATION,
    IF_MATCH,
    IF_NONE_MATCH,
    IF_MODIFIED_SINCE,
    IF_UNMODIFIED_SINCE,
    IF_RANGE,
)


def resolve_location(current_url: str, location: str) -> str:
    """Resolve a ``Location`` header value against the current URL.

    An absolute location replaces the current URL unchanged. A relative
    location is resolved with RFC 3986 reference resolution: ``/z``
    replaces the whole path, ``z`` replaces the last path segment and
    ``z/`` keeps its trailing slash.

    Args:
        current_url: The absolute URL of the request that was redirected.
        location: The ``Location`` header value.

    Returns:
        The absolute URL of the next attempt.
    """
    if httpx.URL(location).is_absolute_url:
        return location
    return str(httpx.URL(current_url).join(location))


def handle_redirect(
    request: HttpRequest,
    status_code: int,
    response_headers: HttpHeaders,
) -> bool:
    """Rewrite the request to follow a redirect response.

    The request is left untouched unless redirects are followed, the
    status code is a redirect code and the response has a ``Location``
    header.

    Args:
        request: The request to rewrite.
        status_code: The status code of the response.
        response_headers: The headers of the response.

    Returns:
        ``True`` if the redirect was accepted and the request rewritten.
    """
    location = response_headers.location
    if not request.follow_redirects or not is_redirect(status_code) or location is None:
        return False

    new_url = resolve_location(request.url, location)
    logger.debug(f"{request.method} request to {request.url} redirected ({status_code}) to {new_url}")
    request.url = new_url
    if status_code == STATUS_CODE_SEE_OTHER and request.method == "POST":
        request.method = "GET"
        request.content = None
    for name in STRIPPED_REDIRECT_HEADERS:
        request.headers.pop(name, None)
    return True
