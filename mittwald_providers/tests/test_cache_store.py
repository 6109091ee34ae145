from __future__ import annotations

from mittwald_providers.base.cache import InMemoryCacheStore
from mittwald_providers.base.interfaces import CacheStore


def test_in_memory_cache_satisfies_protocol():
    assert isinstance(InMemoryCacheStore(), CacheStore)  # nosec B101


def test_values_are_copied_in_and_out():
    cache = InMemoryCacheStore()
    models = ["a", "b"]
    cache.set("k", models)
    models.append("c")
    fetched = cache.get("k")
    fetched.append("d")
    assert cache.get("k") == ["a", "b"]  # nosec B101


def test_delete_and_clear():
    cache = InMemoryCacheStore()
    cache.set("a", 1)
    cache.set("b", 2)
    cache.delete("a")
    cache.delete("missing")
    assert "a" not in cache and "b" in cache and len(cache) == 1  # nosec B101
    cache.clear()
    assert cache.get("b") is None and len(cache) == 0  # nosec B101
