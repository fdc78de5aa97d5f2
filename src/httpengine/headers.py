r"""HTTP headers container and wire serialization.

``HttpHeaders`` is a case-insensitive, insertion-ordered mapping from
header name to value. A value can be a string, any object convertible to
a string, an ``Enum`` member, or a list/tuple of those for multi-valued
headers. ``serialize_headers`` turns the container into the ordered
``(name, value)`` pairs handed to the transport.

Example:
    ```pycon
    >>> from httpengine.headers import HttpHeaders, serialize_headers
    >>> headers = HttpHeaders()
    >>> headers.user_agent = "my-app"
    >>> headers["X-Items"] = ["a", "b"]
    >>> headers["accept-encoding"]
    'gzip'
    >>> serialize_headers(headers, user_agent_suffix="engine/1.0")
    [('accept-encoding', 'gzip'), ('user-agent', 'my-app engine/1.0'), ('x-items', 'a'), ('x-items', 'b')]

    ```
"""

from __future__ import annotations

__all__ = ["HttpHeaders", "format_header_value", "serialize_headers"]

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Any

ACCEPT = "Accept"
ACCEPT_ENCODING = "Accept-Encoding"
AUTHORIZATION = "Authorization"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE = "Content-Type"
IF_MATCH = "If-Match"
IF_MODIFIED_SINCE = "If-Modified-Since"
IF_NONE_MATCH = "If-None-Match"
IF_RANGE = "If-Range"
IF_UNMODIFIED_SINCE = "If-Unmodified-Since"
LOCATION = "Location"
RETRY_AFTER = "Retry-After"
USER_AGENT = "User-Agent"


def _header_property(name: str, doc: str) -> property:
    def fget(self: HttpHeaders) -> Any:
        return self.get_first(name)

    def fset(self: HttpHeaders, value: Any) -> None:
        self[name] = value

    def fdel(self: HttpHeaders) -> None:
        self.pop(name, None)

    return property(fget, fset, fdel, doc)


class HttpHeaders(MutableMapping[str, Any]):
    """Case-insensitive, ordered HTTP headers container.

    Lookups ignore case while iteration yields names with the case used
    when they were first set. Setting a header to ``None`` keeps the entry
    but it is omitted on the wire.

    A new container carries ``Accept-Encoding: gzip``; pass
    ``accept_encoding=None`` or assign ``None`` to drop it.

    Args:
        data: Optional initial headers, as a mapping or as name/value pairs.
            Repeated names in pairs accumulate into a list.
        accept_encoding: Initial ``Accept-Encoding`` value.

    Example:
        ```pycon
        >>> from httpengine.headers import HttpHeaders
        >>> headers = HttpHeaders({"Authorization": "Bearer abc"})
        >>> headers["authorization"]
        'Bearer abc'
        >>> headers.authorization
        'Bearer abc'
        >>> del headers.authorization
        >>> "Authorization" in headers
        False

        ```
    """

    def __init__(
        self,
        data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        accept_encoding: str | None = "gzip",
    ) -> None:
        self._store: dict[str, tuple[str, Any]] = {}
        if accept_encoding is not None:
            self[ACCEPT_ENCODING] = accept_encoding
        if data is None:
            return
        if isinstance(data, Mapping):
            for name, value in data.items():
                self[name] = value
            return
        for name, value in data:
            self.add(name, value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> HttpHeaders:
        """Build a container from wire pairs, without default headers.

        Args:
            pairs: The ``(name, value)`` pairs, in wire order.

        Returns:
            The headers container.
        """
        return cls(list(pairs), accept_encoding=None)

    def __getitem__(self, name: str) -> Any:
        return self._store[name.lower()][1]

    def __setitem__(self, name: str, value: Any) -> None:
        key = name.lower()
        original = self._store[key][0] if key in self._store else name
        self._store[key] = (original, value)

    def __delitem__(self, name: str) -> None:
        del self._store[name.lower()]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({dict(self.items())!r})"

    def add(self, name: str, value: Any) -> None:
        """Add a value to a header, turning it into a list if already
        present.

        Args:
            name: The header name.
            value: The value to add.
        """
        if name not in self or self[name] is None:
            self[name] = value
            return
        current = self[name]
        values = list(current) if isinstance(current, (list, tuple)) else [current]
        values.append(value)
        self[name] = values

    def get_all(self, name: str) -> list[str]:
        """Return every wire value of a header.

        Args:
            name: The header name.

        Returns:
            The formatted values, empty if the header is absent or ``None``.
        """
        value = self.get(name)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [format_header_value(item) for item in value if item is not None]
        return [format_header_value(value)]

    def get_first(self, name: str) -> str | None:
        """Return the first wire value of a header.

        Args:
            name: The header name.

        Returns:
            The first formatted value, or ``None`` if there is none.
        """
        values = self.get_all(name)
        return values[0] if values else None

    def copy(self) -> HttpHeaders:
        """Return a shallow copy of the container."""
        headers = HttpHeaders(accept_encoding=None)
        headers._store = dict(self._store)
        return headers

    accept = _header_property(ACCEPT, "The ``Accept`` header.")
    accept_encoding = _header_property(ACCEPT_ENCODING, "The ``Accept-Encoding`` header.")
    authorization = _header_property(AUTHORIZATION, "The ``Authorization`` header.")
    content_encoding = _header_property(CONTENT_ENCODING, "The ``Content-Encoding`` header.")
    content_length = _header_property(CONTENT_LENGTH, "The ``Content-Length`` header.")
    content_type = _header_property(CONTENT_TYPE, "The ``Content-Type`` header.")
    if_match = _header_property(IF_MATCH, "The ``If-Match`` header.")
    if_modified_since = _header_property(IF_MODIFIED_SINCE, "The ``If-Modified-Since`` header.")
    if_none_match = _header_property(IF_NONE_MATCH, "The ``If-None-Match`` header.")
    if_range = _header_property(IF_RANGE, "The ``If-Range`` header.")
    if_unmodified_since = _header_property(
        IF_UNMODIFIED_SINCE, "The ``If-Unmodified-Since`` header."
    )
    location = _header_property(LOCATION, "The ``Location`` header.")
    retry_after = _header_property(RETRY_AFTER, "The ``Retry-After`` header.")
    user_agent = _header_property(USER_AGENT, "The ``User-Agent`` header.")


def format_header_value(value: Any) -> str:
    """Convert a single header value to its wire string.

    ``Enum`` members use their value when it is a string, otherwise their
    name. Every other value uses ``str()``.

    Args:
        value: The header value.

    Returns:
        The wire string.

    Example:
        ```pycon
        >>> from enum import Enum, auto
        >>> from httpengine.headers import format_header_value
        >>> class Mode(Enum):
        ...     VALUE = auto()
        ...     OTHER_VALUE = "other"
        ...
        >>> format_header_value(Mode.VALUE), format_header_value(Mode.OTHER_VALUE)
        ('VALUE', 'other')
        >>> format_header_value(5)
        '5'

        ```
    """
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    return str(value)


def serialize_headers(
    headers: HttpHeaders,
    user_agent_suffix: str | None = None,
) -> list[tuple[str, str]]:
    """Serialize a headers container into ordered wire pairs.

    Names are lower-cased. ``None`` values are omitted, list and tuple
    values emit one pair per element. When ``user_agent_suffix`` is given
    it is appended to the ``User-Agent`` value with a single space, or
    sent alone if no user agent is set. The container is not modified.

    Args:
        headers: The headers to serialize.
        user_agent_suffix: Optional suffix for the ``User-Agent`` header.

    Returns:
        The list of ``(lower-cased name, value)`` pairs.
    """
    pairs: list[tuple[str, str]] = []
    user_agent_seen = False
    for name in headers:
        lower = name.lower()
        values = headers.get_all(name)
        if lower == USER_AGENT.lower():
            user_agent_seen = True
            if user_agent_suffix is not None:
                values = [" ".join([*values, user_agent_suffix])]
        pairs.extend((lower, value) for value in values)
    if not user_agent_seen and user_agent_suffix is not None:
        pairs.append((USER_AGENT.lower(), user_agent_suffix))
    return pairs
