"""Wren exception hierarchy.

Every module raises these types so callers can catch ``WrenError``
for anything the package itself rejects.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class InvalidArgument(WrenError, ValueError):  # noqa: N818
    """A required argument was ``None``, not a string, or empty.

    Raised before any state is touched, so the collection is unchanged.
    """

    def __init__(self, argument: str, detail: str = "must not be empty") -> None:
        self.argument = argument
        self.detail = detail
        super().__init__(f"Argument {argument!r} {detail}")


class HeaderEncodingError(WrenError, ValueError):
    """A stored header cannot be encoded with the configured codec.

    Raised by ``HeaderCollection.raw`` when converting to byte pairs.
    """

    def __init__(self, header: str, encoding: str) -> None:
        self.header = header
        self.encoding = encoding
        super().__init__(f"Header {header!r} cannot be encoded as {encoding}")


class UnsupportedOperation(WrenError):  # noqa: N818
    """The operation is not available on this object.

    ``HeaderIterator.remove()`` raises it: entries can only be removed
    through ``HeaderCollection.remove_header_values()``.
    """
