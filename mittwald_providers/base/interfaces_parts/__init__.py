"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``mittwald_providers.base.interfaces`` to re-export a stable API.
"""

from .model_catalog_source import ModelCatalogSource
from .request_builder import RequestBuilder
from .chunk_aggregator import ChunkAggregator
from .chat_transport import ChatTransport
from .cache_store import CacheStore
from .credential_resolver import CredentialResolver
from .notifier import Notifier

__all__ = [
    "ModelCatalogSource",
    "RequestBuilder",
    "ChunkAggregator",
    "ChatTransport",
    "CacheStore",
    "CredentialResolver",
    "Notifier",
]
