"""Argument checks shared by the public API."""

from wren.errors import InvalidArgument


def not_empty(value: str | None, argument: str) -> str:
    """Return *value* unchanged if it is a non-empty ``str``.

    Whitespace is not stripped here: ``"  "`` passes. Callers that want
    trimmed input strip after checking.

    Raises:
        InvalidArgument: *value* is ``None``, not a ``str``, or ``""``.
    """
    if value is None:
        raise InvalidArgument(argument, "must not be None")
    if not isinstance(value, str):
        raise InvalidArgument(argument, f"must be a str, got {type(value).__name__}")
    if not value:
        raise InvalidArgument(argument)
    return value
