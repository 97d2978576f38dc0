"""Header collection configuration.

HeadersConfig is a frozen dataclass: immutable after creation, shared
freely between collections.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HeadersConfig:
    """Options for ``HeaderCollection``. Immutable after creation.

    Override what you need::

        config = HeadersConfig(encoding="utf-8")
    """

    # Codec for raw byte pairs (ASGI header names and values are latin-1)
    encoding: str = "latin-1"
