"""Process-local cache store.

A plain dictionary guarded by a lock. Entries never expire; hosts wanting
expiry plug in their own :class:`~mittwald_providers.base.interfaces.CacheStore`.
Stored values are copied on the way in and out so callers cannot mutate
cached entries through a returned reference.
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, Optional


class InMemoryCacheStore:
    """Thread-safe dictionary-backed cache."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            value = self._data.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


__all__ = ["InMemoryCacheStore"]
