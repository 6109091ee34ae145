"""Pytest configuration for the mittwald provider test suite.

Provides a provider wired to a scripted fake transport and a handler
capturing structured log events from the shared ``mittwald_providers``
logger (which does not propagate to the root logger).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from mittwald_providers.base.cache import InMemoryCacheStore
from mittwald_providers.base.dto import AdapterParams
from mittwald_providers.base.logging import BASE_LOGGER_NAME, get_logger
from mittwald_providers.base.repositories import KeysRepository
from mittwald_providers.mittwald import MittwaldProvider
from mittwald_providers.tests.utils import API_KEY, FakeTransport


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def cache() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture()
def transport_calls() -> List[Dict[str, Any]]:
    """Arguments the provider passed to its transport factory, in order."""
    return []


@pytest.fixture()
def make_provider(fake_transport, cache, transport_calls):
    """Return a factory building providers wired to the fake transport."""

    def _factory(**params: Any) -> MittwaldProvider:
        def _transport_factory(api_key: str, base_url: str) -> FakeTransport:
            transport_calls.append({"api_key": api_key, "base_url": base_url})
            return fake_transport

        return MittwaldProvider(
            AdapterParams(**params),
            credentials=KeysRepository({"mittwald_api_key": API_KEY}),
            cache=cache,
            transport_factory=_transport_factory,
        )

    return _factory


@pytest.fixture()
def provider(make_provider) -> MittwaldProvider:
    return make_provider()


class _ListHandler(logging.Handler):
    """Capture decoded log payloads into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"msg": record.getMessage()}
        if not isinstance(payload, dict):
            payload = {"msg": record.getMessage()}
        payload["_level"] = record.levelno
        self.events.append(payload)


@pytest.fixture()
def log_events() -> Iterator[List[Dict[str, Any]]]:
    """Collect structured log events emitted during the test."""
    base = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    previous_level = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    yield handler.events
    base.removeHandler(handler)
    base.setLevel(previous_level)
