"""Wren: a case-insensitive, multi-valued header collection.

Accumulates already-parsed HTTP header name/value pairs and answers
lookups regardless of name casing.

Basic usage::

    from wren import HeaderCollection

    headers = HeaderCollection()
    headers.add_header("Accept", "text/html")
    headers.add_header("accept", "application/json")
    headers.get_values("ACCEPT")  # ["text/html"]
"""

__version__ = "0.1.0"
__all__ = [
    "Entry",
    "HeaderCollection",
    "HeaderEncodingError",
    "HeaderIterator",
    "HeadersConfig",
    "InvalidArgument",
    "UnsupportedOperation",
    "WrenError",
]

# Public name -> defining module, resolved on first access
_LAZY_IMPORTS: dict[str, str] = {
    "Entry": "wren.http.headers",
    "HeaderCollection": "wren.http.headers",
    "HeaderEncodingError": "wren.errors",
    "HeaderIterator": "wren.http.headers",
    "HeadersConfig": "wren.config",
    "InvalidArgument": "wren.errors",
    "UnsupportedOperation": "wren.errors",
    "WrenError": "wren.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
