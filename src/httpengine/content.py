r"""Request content abstractions and transmission wrappers.

Request content must be re-readable: every attempt of the retry loop
writes the full body again through ``write_to``. ``GzipContent`` and
``LoggingContent`` wrap another content for one transmission and are
applied by the executor when staging an attempt.
"""

from __future__ import annotations

__all__ = [
    "ByteArrayContent",
    "GzipContent",
    "HttpContent",
    "LoggingContent",
    "content_to_bytes",
    "get_charset",
    "normalize_media_type",
]

import gzip
import io
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import BinaryIO

logger: logging.Logger = logging.getLogger(__name__)


class HttpContent(ABC):
    """Abstract base class for request bodies.

    Implementations must be able to write their whole body on every call
    to ``write_to``.
    """

    @property
    @abstractmethod
    def media_type(self) -> str | None:
        """The media type of the content, or ``None``."""

    @property
    @abstractmethod
    def length(self) -> int:
        """The content length in bytes, or ``-1`` if unknown."""

    @property
    def encoding(self) -> str | None:
        """The content encoding applied on the wire, or ``None``."""
        return None

    @abstractmethod
    def write_to(self, stream: BinaryIO) -> None:
        """Write the full content to a binary stream.

        Args:
            stream: The destination stream.
        """


class ByteArrayContent(HttpContent):
    """In-memory request body.

    Args:
        media_type: The media type, e.g. ``"application/json"``.
        data: The body bytes.

    Example:
        ```pycon
        >>> from httpengine.content import ByteArrayContent, content_to_bytes
        >>> content = ByteArrayContent("text/plain", b"hello")
        >>> content.length
        5
        >>> content_to_bytes(content)
        b'hello'

        ```
    """

    def __init__(self, media_type: str | None, data: bytes) -> None:
        self._media_type = media_type
        self._data = bytes(data)

    @classmethod
    def from_string(cls, media_type: str | None, text: str) -> ByteArrayContent:
        """Build a content from a string encoded as UTF-8."""
        return cls(media_type, text.encode("utf-8"))

    @property
    def media_type(self) -> str | None:
        return self._media_type

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def data(self) -> bytes:
        return self._data

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(self._data)


class GzipContent(HttpContent):
    """Gzip encoding wrapper applied when gzip content is enabled.

    The compressed length is unknown until written, so ``length`` is
    ``-1``.

    Args:
        content: The wrapped content.
    """

    def __init__(self, content: HttpContent) -> None:
        self.content = content

    @property
    def media_type(self) -> str | None:
        return self.content.media_type

    @property
    def length(self) -> int:
        return -1

    @property
    def encoding(self) -> str | None:
        return "gzip"

    def write_to(self, stream: BinaryIO) -> None:
        with gzip.GzipFile(fileobj=stream, mode="wb") as zipper:
            self.content.write_to(zipper)


class LoggingContent(HttpContent):
    """Logging wrapper that writes the first bytes of the body to the
    debug log.

    Args:
        content: The wrapped content.
        content_logging_limit: Maximum number of bytes to log. Nothing is
            logged when it is ``0``.
    """

    def __init__(self, content: HttpContent, content_logging_limit: int) -> None:
        if content_logging_limit < 0:
            msg = f"content_logging_limit must be >= 0, got {content_logging_limit}"
            raise ValueError(msg)
        self.content = content
        self.content_logging_limit = content_logging_limit

    @property
    def media_type(self) -> str | None:
        return self.content.media_type

    @property
    def length(self) -> int:
        return self.content.length

    @property
    def encoding(self) -> str | None:
        return self.content.encoding

    def write_to(self, stream: BinaryIO) -> None:
        buffer = io.BytesIO()
        self.content.write_to(buffer)
        data = buffer.getvalue()
        stream.write(data)
        if self.content_logging_limit == 0:
            return
        excerpt = data[: self.content_logging_limit].decode(
            get_charset(self.media_type), errors="replace"
        )
        suffix = " ..." if len(data) > self.content_logging_limit else ""
        logger.debug(f"Request content ({len(data)} bytes): {excerpt}{suffix}")


def content_to_bytes(content: HttpContent) -> bytes:
    """Write a content into memory and return its bytes.

    Args:
        content: The content to write.

    Returns:
        The body bytes as they go on the wire.
    """
    buffer = io.BytesIO()
    content.write_to(buffer)
    return buffer.getvalue()


def normalize_media_type(media_type: str | None) -> str | None:
    """Strip parameters from a media type.

    Example:
        ```pycon
        >>> from httpengine.content import normalize_media_type
        >>> normalize_media_type("text/html; charset=ISO-8859-4")
        'text/html'

        ```
    """
    if media_type is None:
        return None
    return media_type.split(";", 1)[0].strip().lower()


def get_charset(media_type: str | None, default: str = "utf-8") -> str:
    """Extract the ``charset`` parameter of a media type.

    Example:
        ```pycon
        >>> from httpengine.content import get_charset
        >>> get_charset("text/html; charset=ISO-8859-4")
        'iso-8859-4'
        >>> get_charset("application/json")
        'utf-8'

        ```
    """
    if media_type is None:
        return default
    for parameter in media_type.split(";")[1:]:
        name, _, value = parameter.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"').lower()
    return default
