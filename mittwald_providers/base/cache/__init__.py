"""Cache backends for resolved model catalogs."""

from .memory import InMemoryCacheStore

__all__ = ["InMemoryCacheStore"]
