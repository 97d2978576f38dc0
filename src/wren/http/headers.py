"""Mutable, case-insensitive, multi-valued header collection.

Accumulates already-parsed header name/value pairs for one request or
response. Names keep their original casing; lookups and removals ignore
case.

Adding is keyed on the exact (stripped) name, while reading and removing
compare ignoring case. ``add_header("x-foo", ...)`` followed by
``add_header("X-Foo", ...)`` therefore stores two entries; ``get_values``
returns the first match and ``remove_header_values`` drops both.

Not thread-safe. Share an instance across threads only behind your own lock.
"""

import logging
from collections.abc import Iterable, Iterator

from wren._internal.args import not_empty
from wren.config import HeadersConfig
from wren.errors import HeaderEncodingError, InvalidArgument, UnsupportedOperation

logger = logging.getLogger("wren.headers")


class Entry:
    """Read-only view of one header name and its values.

    Backed by the collection's own value list, so it is only meaningful
    while that header is still stored. ``values`` returns a copy.
    """

    __slots__ = ("_name", "_values")

    def __init__(self, name: str, values: list[str]) -> None:
        self._name = name
        self._values = values

    @property
    def name(self) -> str:
        """The stored header name, original casing."""
        return self._name

    @property
    def values(self) -> list[str]:
        """Snapshot of the header's values at access time."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"Entry({self._name!r}, {self._values!r})"


class HeaderIterator(Iterator[Entry]):
    """Single-pass iterator over a collection's entries.

    Adding or removing headers while iterating raises ``RuntimeError``
    on the next step.
    """

    __slots__ = ("_items",)

    def __init__(self, headers: dict[str, list[str]]) -> None:
        self._items = iter(headers.items())

    def __next__(self) -> Entry:
        name, values = next(self._items)
        return Entry(name, values)

    def remove(self) -> None:
        """Always raises: entries are read-only during iteration."""
        raise UnsupportedOperation("HeaderIterator does not support remove()")


class HeaderCollection:
    """Case-insensitive multimap of header name to ordered values.

    Usage::

        headers = HeaderCollection()
        headers.add_header("Set-Cookie", "a=1")
        headers.add_header("Set-Cookie", "b=2")
        headers.get_values("set-cookie")  # ["a=1", "b=2"]
    """

    __slots__ = ("_config", "_headers")

    def __init__(self, config: HeadersConfig | None = None) -> None:
        self._config = config or HeadersConfig()
        self._headers: dict[str, list[str]] = {}

    @classmethod
    def from_raw(
        cls,
        raw: Iterable[tuple[bytes, bytes]],
        config: HeadersConfig | None = None,
    ) -> "HeaderCollection":
        """Build a collection from ASGI-style ``(name, value)`` byte pairs.

        Raises:
            InvalidArgument: a pair is empty or does not decode under
                ``config.encoding``.
        """
        collection = cls(config)
        encoding = collection.config.encoding
        try:
            pairs = [(name.decode(encoding), value.decode(encoding)) for name, value in raw]
        except UnicodeDecodeError as exc:
            raise InvalidArgument("raw", f"is not valid {encoding}: {exc.reason}") from exc
        collection.add_headers(pairs)
        return collection

    @property
    def config(self) -> HeadersConfig:
        return self._config

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Encoded byte pairs, one per value, for an ASGI response start.

        Raises:
            HeaderEncodingError: a stored name or value cannot be encoded
                under ``config.encoding``.
        """
        encoding = self._config.encoding
        pairs: list[tuple[bytes, bytes]] = []
        for name, values in self._headers.items():
            try:
                pairs.extend((name.encode(encoding), value.encode(encoding)) for value in values)
            except UnicodeEncodeError as exc:
                raise HeaderEncodingError(name, encoding) from exc
        return tuple(pairs)

    def add_header(self, name: str, value: str) -> None:
        """Append *value* to the values stored under the exact name *name*.

        Both arguments are checked for emptiness first and stripped of
        surrounding whitespace after, so ``"  "`` is stored as ``""``.

        Raises:
            InvalidArgument: *name* or *value* is ``None`` or empty.
        """
        name = not_empty(name, "name").strip()
        value = not_empty(value, "value").strip()
        self._headers.setdefault(name, []).append(value)

    def add_headers(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Add every ``(name, value)`` pair, or none if any is invalid."""
        checked = [(not_empty(name, "name"), not_empty(value, "value")) for name, value in pairs]
        for name, value in checked:
            self.add_header(name, value)

    def remove_header_values(self, name: str) -> None:
        """Remove every stored header whose name matches *name* ignoring case."""
        key_lower = not_empty(name, "name").strip().lower()
        matches = [key for key in self._headers if key.lower() == key_lower]
        for key in matches:
            del self._headers[key]
        if len(matches) > 1:
            logger.debug("Removed %d headers matching %r: %s", len(matches), name, matches)

    def get_values(self, name: str) -> list[str]:
        """Return the values of the first header matching *name* ignoring case.

        Returns an empty list when nothing matches.
        """
        key_lower = not_empty(name, "name").lower()
        for key, values in self._headers.items():
            if key.lower() == key_lower:
                return list(values)
        return []

    def iterator(self) -> HeaderIterator:
        """Return a fresh iterator of read-only entries."""
        return HeaderIterator(self._headers)

    def is_empty(self) -> bool:
        return not self._headers

    def get_count(self) -> int:
        """Number of stored names, not values."""
        return len(self._headers)

    def __iter__(self) -> Iterator[Entry]:
        return self.iterator()

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key_lower = name.lower()
        return any(key.lower() == key_lower for key in self._headers)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._headers.items())
        return f"HeaderCollection({{{items}}})"
