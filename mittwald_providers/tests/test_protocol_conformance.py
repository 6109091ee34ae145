"""The concrete collaborators satisfy the runtime-checkable protocols they stand in for."""
from __future__ import annotations

from mittwald_providers.base.cache import InMemoryCacheStore
from mittwald_providers.base.interfaces import (
    ChatTransport,
    ChunkAggregator,
    CredentialResolver,
    ModelCatalogSource,
    Notifier,
    RequestBuilder,
)
from mittwald_providers.base.repositories import KeysRepository
from mittwald_providers.base.streaming import StreamAggregator
from mittwald_providers.mittwald import LoggingNotifier, ModelCatalogResolver, PayloadBuilder
from mittwald_providers.tests.utils import FakeTransport


def test_concrete_parts_match_protocols():
    transport = FakeTransport()
    assert isinstance(transport, ChatTransport)  # nosec B101
    assert isinstance(ModelCatalogResolver(transport, InMemoryCacheStore()), ModelCatalogSource)  # nosec B101
    assert isinstance(PayloadBuilder(), RequestBuilder)  # nosec B101
    assert isinstance(StreamAggregator(), ChunkAggregator)  # nosec B101
    assert isinstance(KeysRepository(), CredentialResolver)  # nosec B101
    assert isinstance(LoggingNotifier(), Notifier)  # nosec B101
