from __future__ import annotations

import asyncio
from types import SimpleNamespace

from mittwald_providers.mittwald.transport import OpenAITransport


class _Stream:
    def __init__(self, items):
        self._items = list(items)
        self.closed = False

    def __iter__(self):
        return iter(self._items)

    def close(self):
        self.closed = True


class _AsyncStream:
    def __init__(self, items, error=None):
        self._items = list(items)
        self._error = error
        self.closed = False

    def __aiter__(self):
        return self._gen()

    async def _gen(self):
        for item in self._items:
            yield item
        if self._error is not None:
            raise self._error

    async def close(self):
        self.closed = True


class _Completions:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.result


class _AsyncCompletions(_Completions):
    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.result


def _client(completions=None, models=None, embeddings=None):
    return SimpleNamespace(
        chat=SimpleNamespace(completions=completions or _Completions(None)),
        models=SimpleNamespace(list=lambda: SimpleNamespace(data=models or [])),
        embeddings=embeddings or _Completions(None),
    )


def test_list_models_maps_descriptors():
    raw = [SimpleNamespace(id="gpt-oss-120b", owned_by="mittwald"), {"id": "x", "owned_by": "openai-dev"}]
    transport = OpenAITransport("sk-1", "https://llm.test/v1", client=_client(models=raw))
    models = transport.list_models()
    assert [(m.id, m.owned_by) for m in models] == [("gpt-oss-120b", "mittwald"), ("x", "openai-dev")]  # nosec B101


def test_chat_completion_passes_payload():
    completions = _Completions("response")
    transport = OpenAITransport("sk-1", "https://llm.test/v1", client=_client(completions))
    assert transport.create_chat_completion({"model": "m", "messages": []}) == "response"  # nosec B101
    assert completions.calls == [{"model": "m", "messages": []}]  # nosec B101


def test_streamed_completion_sets_stream_and_closes():
    stream = _Stream(["a", "b"])
    completions = _Completions(stream)
    transport = OpenAITransport("sk-1", "https://llm.test/v1", client=_client(completions))
    assert list(transport.create_chat_completion_streamed({"model": "m"})) == ["a", "b"]  # nosec B101
    assert completions.calls[0]["stream"] is True and stream.closed  # nosec B101


def test_async_stream_uses_injected_async_client():
    stream = _AsyncStream(["x", "y"])
    completions = _AsyncCompletions(stream)
    transport = OpenAITransport(
        "sk-1", "https://llm.test/v1", client=_client(), async_client=_client(completions)
    )

    async def _collect():
        return [item async for item in transport.create_chat_completion_streamed_async({"model": "m"})]

    assert asyncio.run(_collect()) == ["x", "y"]  # nosec B101
    assert completions.calls[0]["stream"] is True and stream.closed  # nosec B101


def test_async_stream_is_closed_on_error():
    stream = _AsyncStream(["x"], error=ConnectionError("reset"))
    transport = OpenAITransport(
        "sk-1", "https://llm.test/v1", client=_client(), async_client=_client(_AsyncCompletions(stream))
    )

    async def _collect():
        seen = []
        try:
            async for item in transport.create_chat_completion_streamed_async({"model": "m"}):
                seen.append(item)
        except ConnectionError:
            return seen
        return None

    assert asyncio.run(_collect()) == ["x"]  # nosec B101
    assert stream.closed  # nosec B101


def test_async_stream_is_closed_on_early_exit():
    stream = _AsyncStream(["x", "y", "z"])
    transport = OpenAITransport(
        "sk-1", "https://llm.test/v1", client=_client(), async_client=_client(_AsyncCompletions(stream))
    )

    async def _first():
        gen = transport.create_chat_completion_streamed_async({"model": "m"})
        first = await gen.__anext__()
        await gen.aclose()
        return first

    assert asyncio.run(_first()) == "x"  # nosec B101
    assert stream.closed  # nosec B101


def test_embedding_call():
    embeddings = _Completions("vec")
    transport = OpenAITransport("sk-1", "https://llm.test/v1", client=_client(embeddings=embeddings))
    assert transport.create_embedding({"model": "Qwen3-Embedding-8B", "input": "x"}) == "vec"  # nosec B101


def test_real_sdk_client_gets_base_url():
    transport = OpenAITransport("sk-live-123", "https://llm.test/v1")
    assert transport.base_url == "https://llm.test/v1"  # nosec B101
    assert str(transport._client.base_url).rstrip("/") == "https://llm.test/v1"  # nosec B101
