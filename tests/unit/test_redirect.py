r"""Unit tests for redirect resolution."""

from __future__ import annotations

import pytest

from httpengine.content import ByteArrayContent
from httpengine.headers import HttpHeaders
from httpengine.redirect import STRIPPED_REDIRECT_HEADERS, handle_redirect, resolve_location
from httpengine.request import HttpRequest
from httpengine.transport import MockHttpTransport


def create_request(method: str = "GET", url: str = "http://some.org/a/b") -> HttpRequest:
    return HttpRequest(MockHttpTransport(), method, url)


######################################
#     Tests for resolve_location     #
######################################


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("z", "http://some.org/a/z"),
        ("z/", "http://some.org/a/z/"),
        ("/z", "http://some.org/z"),
        ("../z", "http://some.org/z"),
        ("z?q=1", "http://some.org/a/z?q=1"),
        ("http://other.org/c", "http://other.org/c"),
        ("https://other.org/c?x=1#frag", "https://other.org/c?x=1#frag"),
    ],
)
def test_resolve_location(location: str, expected: str) -> None:
    assert resolve_location("http://some.org/a/b", location) == expected


def test_resolve_location_absolute_unchanged() -> None:
    assert resolve_location("http://some.org/a/b", "HTTP://Other.org/C") == "HTTP://Other.org/C"


#####################################
#     Tests for handle_redirect     #
#####################################


@pytest.mark.parametrize("status_code", [301, 302, 303, 307, 308])
def test_handle_redirect_accepted(status_code: int) -> None:
    request = create_request()
    assert handle_redirect(request, status_code, HttpHeaders({"Location": "/z"}))
    assert request.url == "http://some.org/z"


@pytest.mark.parametrize("status_code", [200, 304, 400, 404, 500])
def test_handle_redirect_not_redirect_code(status_code: int) -> None:
    request = create_request()
    assert not handle_redirect(request, status_code, HttpHeaders({"Location": "/z"}))
    assert request.url == "http://some.org/a/b"


def test_handle_redirect_without_location() -> None:
    request = create_request()
    assert not handle_redirect(request, 302, HttpHeaders())
    assert request.url == "http://some.org/a/b"


def test_handle_redirect_not_followed() -> None:
    request = create_request()
    request.follow_redirects = False
    assert not handle_redirect(request, 302, HttpHeaders({"Location": "/z"}))
    assert request.url == "http://some.org/a/b"


def test_handle_redirect_see_other_post() -> None:
    request = create_request("POST", "http://gmail.com")
    request.content = ByteArrayContent.from_string("text/plain", "data")

    assert handle_redirect(request, 303, HttpHeaders({"Location": "http://google.com"}))

    assert request.method == "GET"
    assert request.content is None
    assert request.url == "http://google.com"


@pytest.mark.parametrize("method", ["PUT", "DELETE", "GET"])
def test_handle_redirect_see_other_other_methods(method: str) -> None:
    content = ByteArrayContent.from_string("text/plain", "data")
    request = create_request(method)
    request.content = content

    assert handle_redirect(request, 303, HttpHeaders({"Location": "/z"}))

    assert request.method == method
    assert request.content is content


@pytest.mark.parametrize("status_code", [301, 302, 307, 308])
def test_handle_redirect_post_kept(status_code: int) -> None:
    request = create_request("POST")
    assert handle_redirect(request, status_code, HttpHeaders({"Location": "/z"}))
    assert request.method == "POST"


def test_handle_redirect_strips_headers() -> None:
    request = create_request()
    for name in STRIPPED_REDIRECT_HEADERS:
        request.headers[name] = "value"
    request.headers["X-Custom"] = "kept"

    assert handle_redirect(request, 302, HttpHeaders({"Location": "/z"}))

    assert dict(request.headers) == {"Accept-Encoding": "gzip", "X-Custom": "kept"}


def test_handle_redirect_strips_headers_case_insensitive() -> None:
    request = create_request()
    request.headers["authorization"] = "Bearer abc"
    request.headers["if-none-match"] = '"etag"'

    handle_redirect(request, 301, HttpHeaders({"Location": "/z"}))

    assert request.headers.authorization is None
    assert request.headers.if_none_match is None
