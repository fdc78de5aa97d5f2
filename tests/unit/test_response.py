r"""Unit tests for HttpResponse, HttpResponseError and status helpers."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from httpengine.exceptions import TRANSPORT_ERRORS, HttpResponseError
from httpengine.headers import HttpHeaders
from httpengine.response import HttpResponse
from httpengine.status import REDIRECT_STATUS_CODES, is_redirect, is_success
from tests.helpers import TEST_URL, create_low_level_response

####################################
#     Tests for status helpers     #
####################################


@pytest.mark.parametrize("status_code", [200, 201, 204, 299])
def test_is_success_true(status_code: int) -> None:
    assert is_success(status_code)


@pytest.mark.parametrize("status_code", [100, 199, 300, 301, 404, 500])
def test_is_success_false(status_code: int) -> None:
    assert not is_success(status_code)


@pytest.mark.parametrize("status_code", [301, 302, 303, 307, 308])
def test_is_redirect_true(status_code: int) -> None:
    assert is_redirect(status_code)


@pytest.mark.parametrize("status_code", [200, 300, 304, 305, 306, 400])
def test_is_redirect_false(status_code: int) -> None:
    assert not is_redirect(status_code)


def test_redirect_status_codes() -> None:
    assert REDIRECT_STATUS_CODES == {301, 302, 303, 307, 308}


##################################
#     Tests for HttpResponse     #
##################################


def test_http_response_from_low_level() -> None:
    response = HttpResponse.from_low_level(
        create_low_level_response(
            201,
            headers=[("Content-Type", "application/json"), ("X-Id", "1"), ("X-Id", "2")],
            content=b"{}",
            reason_phrase="Created",
        ),
        method="POST",
        url=TEST_URL,
    )
    assert response.status_code == 201
    assert response.reason_phrase == "Created"
    assert response.content == b"{}"
    assert response.request_method == "POST"
    assert response.request_url == TEST_URL
    assert response.headers.get_all("x-id") == ["1", "2"]
    assert response.headers.accept_encoding is None


def test_http_response_defaults() -> None:
    response = HttpResponse(status_code=204)
    assert response.reason_phrase == ""
    assert response.content == b""
    assert len(response.headers) == 0
    assert response.content_type is None
    assert response.media_type is None


def test_http_response_is_frozen() -> None:
    response = HttpResponse(status_code=200)
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.status_code = 500


@pytest.mark.parametrize(("status_code", "expected"), [(200, True), (302, False), (500, False)])
def test_http_response_is_success_status_code(status_code: int, expected: bool) -> None:
    assert HttpResponse(status_code=status_code).is_success_status_code == expected


def test_http_response_content_headers() -> None:
    response = HttpResponse(
        status_code=200,
        headers=HttpHeaders.from_pairs(
            [("Content-Type", "Text/HTML; charset=UTF-8"), ("Content-Encoding", "gzip")]
        ),
    )
    assert response.content_type == "Text/HTML; charset=UTF-8"
    assert response.media_type == "text/html"
    assert response.content_encoding == "gzip"


def test_http_response_parse_as_string_charset() -> None:
    response = HttpResponse(
        status_code=200,
        headers=HttpHeaders.from_pairs([("Content-Type", "text/plain; charset=latin-1")]),
        content="café".encode("latin-1"),
    )
    assert response.parse_as_string() == "café"


def test_http_response_parse_as_string_unknown_charset() -> None:
    response = HttpResponse(
        status_code=200,
        headers=HttpHeaders.from_pairs([("Content-Type", "text/plain; charset=unknown-x")]),
        content="café".encode(),
    )
    assert response.parse_as_string() == "café"


#######################################
#     Tests for HttpResponseError     #
#######################################


def test_http_response_error_attributes() -> None:
    headers = HttpHeaders.from_pairs([("Retry-After", "120")])
    response = HttpResponse(
        status_code=503,
        reason_phrase="Service Unavailable",
        headers=headers,
        content=b"down",
        request_method="PUT",
        request_url=TEST_URL,
    )
    error = HttpResponseError(response)
    assert error.response is response
    assert error.status_code == 503
    assert error.reason_phrase == "Service Unavailable"
    assert error.headers is headers
    assert error.content == b"down"
    assert error.method == "PUT"
    assert error.url == TEST_URL
    assert str(error) == "503 Service Unavailable\ndown"


def test_http_response_error_message_without_content() -> None:
    error = HttpResponseError(HttpResponse(status_code=404, reason_phrase="Not Found"))
    assert str(error) == "404 Not Found"


def test_http_response_error_message_without_reason() -> None:
    assert str(HttpResponseError(HttpResponse(status_code=500))) == "500"


def test_http_response_error_message_truncated() -> None:
    error = HttpResponseError(HttpResponse(status_code=500, content=b"x" * 2000))
    assert str(error) == f"500\n{'x' * 1024}..."


def test_http_response_error_custom_message() -> None:
    error = HttpResponseError(HttpResponse(status_code=500), message="server failed")
    assert str(error) == "server failed"


def test_http_response_error_is_runtime_error() -> None:
    assert issubclass(HttpResponseError, RuntimeError)


def test_transport_errors() -> None:
    assert TRANSPORT_ERRORS == (OSError, httpx.TransportError)
