r"""Unit tests for request content and its transmission wrappers."""

from __future__ import annotations

import gzip
import logging

import pytest

from httpengine.content import (
    ByteArrayContent,
    GzipContent,
    LoggingContent,
    content_to_bytes,
    get_charset,
    normalize_media_type,
)

######################################
#     Tests for ByteArrayContent     #
######################################


def test_byte_array_content() -> None:
    content = ByteArrayContent("application/octet-stream", b"\x00\x01")
    assert content.media_type == "application/octet-stream"
    assert content.length == 2
    assert content.encoding is None
    assert content.data == b"\x00\x01"


def test_byte_array_content_from_string() -> None:
    content = ByteArrayContent.from_string("text/plain", "héllo")
    assert content.data == "héllo".encode()
    assert content.length == 6


def test_byte_array_content_re_readable() -> None:
    content = ByteArrayContent.from_string("text/plain", "abc")
    assert content_to_bytes(content) == b"abc"
    assert content_to_bytes(content) == b"abc"


#################################
#     Tests for GzipContent     #
#################################


def test_gzip_content() -> None:
    content = GzipContent(ByteArrayContent.from_string("text/plain", "abc" * 100))
    assert content.media_type == "text/plain"
    assert content.length == -1
    assert content.encoding == "gzip"
    assert gzip.decompress(content_to_bytes(content)) == b"abc" * 100


def test_gzip_content_re_readable() -> None:
    content = GzipContent(ByteArrayContent.from_string("text/plain", "abc"))
    assert gzip.decompress(content_to_bytes(content)) == b"abc"
    assert gzip.decompress(content_to_bytes(content)) == b"abc"


####################################
#     Tests for LoggingContent     #
####################################


def test_logging_content_delegates() -> None:
    wrapped = GzipContent(ByteArrayContent.from_string("text/plain", "abc"))
    content = LoggingContent(wrapped, 10)
    assert content.media_type == "text/plain"
    assert content.length == -1
    assert content.encoding == "gzip"


def test_logging_content_writes_full_body(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="httpengine")
    content = LoggingContent(ByteArrayContent.from_string("text/plain", "hello world"), 5)
    assert content_to_bytes(content) == b"hello world"
    assert "Request content (11 bytes): hello ..." in caplog.text


def test_logging_content_short_body(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="httpengine")
    content = LoggingContent(ByteArrayContent.from_string("text/plain", "hi"), 5)
    assert content_to_bytes(content) == b"hi"
    assert "Request content (2 bytes): hi" in caplog.text
    assert "..." not in caplog.text


def test_logging_content_zero_limit(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="httpengine")
    content = LoggingContent(ByteArrayContent.from_string("text/plain", "hello"), 0)
    assert content_to_bytes(content) == b"hello"
    assert "Request content" not in caplog.text


def test_logging_content_invalid_limit() -> None:
    with pytest.raises(ValueError, match=r"content_logging_limit must be >= 0, got -1"):
        LoggingContent(ByteArrayContent("text/plain", b""), -1)


###################################
#     Tests for media helpers     #
###################################


@pytest.mark.parametrize(
    ("media_type", "expected"),
    [
        ("text/html; charset=ISO-8859-4", "text/html"),
        ("Application/JSON", "application/json"),
        ("text/plain", "text/plain"),
        (None, None),
    ],
)
def test_normalize_media_type(media_type: str | None, expected: str | None) -> None:
    assert normalize_media_type(media_type) == expected


@pytest.mark.parametrize(
    ("media_type", "expected"),
    [
        ("text/html; charset=ISO-8859-4", "iso-8859-4"),
        ('text/html; charset="utf-16"', "utf-16"),
        ("text/html; boundary=x; charset=ascii", "ascii"),
        ("application/json", "utf-8"),
        (None, "utf-8"),
    ],
)
def test_get_charset(media_type: str | None, expected: str) -> None:
    assert get_charset(media_type) == expected


def test_get_charset_default() -> None:
    assert get_charset("text/plain", default="latin-1") == "latin-1"
