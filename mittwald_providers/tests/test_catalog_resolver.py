from __future__ import annotations

import base64
import hashlib

import pytest

from mittwald_providers.base.cache import InMemoryCacheStore
from mittwald_providers.base.models import ModelCapability, OperationType
from mittwald_providers.mittwald.catalog import ModelCatalogResolver, cache_key, model_matches
from mittwald_providers.tests.utils import FakeTransport, model


LISTING = [
    model("gpt-oss-120b"),
    model("Mistral-Small-3.2-24B-Instruct"),
    model("Qwen3-Coder-30B-Instruct"),
    model("Qwen3-Embedding-8B"),
    model("whisper-large-v3-turbo"),
    model("gpt-oss-20b-internal", owned_by="openai-dev"),
]


@pytest.fixture()
def resolver(fake_transport: FakeTransport, cache: InMemoryCacheStore) -> ModelCatalogResolver:
    fake_transport.models = list(LISTING)
    return ModelCatalogResolver(fake_transport, cache)


def test_chat_catalog_is_sorted_and_skips_internal_models(resolver):
    assert resolver.resolve(OperationType.CHAT) == [  # nosec B101
        "Mistral-Small-3.2-24B-Instruct",
        "Qwen3-Coder-30B-Instruct",
        "gpt-oss-120b",
    ]


def test_vision_narrows_to_mistral(resolver):
    models = resolver.resolve("chat", [ModelCapability.CHAT_WITH_IMAGE_VISION])
    assert models == ["Mistral-Small-3.2-24B-Instruct"]  # nosec B101


def test_json_output_and_vision_are_anded(resolver):
    models = resolver.resolve(
        OperationType.CHAT,
        [ModelCapability.CHAT_JSON_OUTPUT, ModelCapability.CHAT_WITH_IMAGE_VISION],
    )
    assert models == ["Mistral-Small-3.2-24B-Instruct"]  # nosec B101


@pytest.mark.parametrize("cap", [ModelCapability.CHAT_WITH_AUDIO, ModelCapability.CHAT_WITH_VIDEO])
def test_audio_and_video_yield_nothing(resolver, cap):
    assert resolver.resolve(OperationType.CHAT, [cap]) == []  # nosec B101


def test_embeddings_catalog(resolver):
    assert resolver.resolve(OperationType.EMBEDDINGS) == ["Qwen3-Embedding-8B"]  # nosec B101


def test_operation_without_allowlist_matches_nothing(resolver):
    assert resolver.resolve(OperationType.SPEECH_TO_TEXT) == []  # nosec B101


def test_duplicate_ids_are_collapsed(fake_transport, cache):
    fake_transport.models = [model("gpt-oss-120b"), model("gpt-oss-120b")]
    assert ModelCatalogResolver(fake_transport, cache).resolve("chat") == ["gpt-oss-120b"]  # nosec B101


def test_second_lookup_is_served_from_cache(resolver, fake_transport):
    first = resolver.resolve(OperationType.CHAT, [ModelCapability.CHAT_JSON_OUTPUT])
    fake_transport.models = []
    second = resolver.resolve(OperationType.CHAT, [ModelCapability.CHAT_JSON_OUTPUT])
    assert first == second  # nosec B101
    assert fake_transport.list_calls == 1  # nosec B101


def test_empty_results_are_not_cached(resolver, fake_transport, cache):
    assert resolver.resolve(OperationType.MODERATION) == []  # nosec B101
    assert len(cache) == 0  # nosec B101
    resolver.resolve(OperationType.MODERATION)
    assert fake_transport.list_calls == 2  # nosec B101


def test_cache_key_ignores_capability_order():
    a = cache_key("chat", ["chat_json_output", "chat_with_image_vision"])
    b = cache_key(OperationType.CHAT, [ModelCapability.CHAT_WITH_IMAGE_VISION, ModelCapability.CHAT_JSON_OUTPUT])
    assert a == b  # nosec B101
    assert cache_key("chat", []) != cache_key("embeddings", [])  # nosec B101


def test_cache_key_format():
    digest = base64.urlsafe_b64encode(hashlib.sha256(b"[]").digest()).decode().rstrip("=")
    assert cache_key(OperationType.CHAT, []) == f"mittwald_models_chat_{digest}"  # nosec B101


def test_transport_errors_propagate(resolver, fake_transport, cache):
    fake_transport.error = ConnectionError("listing down")
    with pytest.raises(ConnectionError):
        resolver.resolve(OperationType.CHAT)
    assert len(cache) == 0  # nosec B101


def test_unknown_capability_does_not_narrow(resolver):
    assert resolver.resolve(OperationType.CHAT, ["chat_with_tools_v2"]) == resolver.resolve(OperationType.CHAT)  # nosec B101
    vision = resolver.resolve(OperationType.CHAT, ["chat_with_smell", ModelCapability.CHAT_WITH_IMAGE_VISION])
    assert vision == ["Mistral-Small-3.2-24B-Instruct"]  # nosec B101
    assert cache_key("chat", ["chat_with_smell"]) == cache_key("chat", [])  # nosec B101


def test_provider_accepts_unknown_capability(provider, fake_transport):
    fake_transport.models = list(LISTING)
    assert provider.get_configured_models(OperationType.CHAT, ["chat_with_tools_v2"]) == [  # nosec B101
        "Mistral-Small-3.2-24B-Instruct",
        "Qwen3-Coder-30B-Instruct",
        "gpt-oss-120b",
    ]


def test_embeddings_id_is_trimmed_before_matching():
    assert model_matches("  qwen3-embedding-8b", OperationType.EMBEDDINGS, []) is True  # nosec B101
    assert model_matches("  gpt-oss-120b", OperationType.CHAT, []) is False  # nosec B101


def test_resolve_logs_cache_hit(resolver, log_events):
    resolver.resolve(OperationType.CHAT)
    resolver.resolve(OperationType.CHAT)
    names = [e["event"] for e in log_events]
    assert names == ["models.list.ok", "models.list.cache_hit"]  # nosec B101
    assert log_events[0]["count"] == 3 and log_events[0]["provider"] == "mittwald"  # nosec B101
