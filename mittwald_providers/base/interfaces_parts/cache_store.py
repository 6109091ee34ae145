"""CacheStore Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Key/value cache used for resolved model catalogs.

    Entries never expire from this layer's point of view; expiry is the
    backend's business.
    """

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value or ``None`` on a miss."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        ...
