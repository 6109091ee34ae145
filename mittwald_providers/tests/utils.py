"""Shared testing utilities for the mittwald provider tests.

Exports:
    - FakeTransport: scripted ``ChatTransport`` recording payloads
    - model / chunk / completion / embedding: raw vendor shape builders
    - API_KEY: dummy credential used by fixtures
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional

from mittwald_providers.base.models import ModelDescriptor

API_KEY = "sk-mittwald-0123456789"  # pragma: allowlist secret - dummy test value


class FakeTransport:
    """Scripted transport; set ``error`` to make every call raise it."""

    def __init__(self) -> None:
        self.models: List[ModelDescriptor] = []
        self.chat_response: Any = None
        self.embedding_response: Any = None
        self.chunks: List[Any] = []
        self.error: Optional[Exception] = None
        self.stream_error_after: Optional[int] = None
        self.list_calls = 0
        self.payloads: List[Dict[str, Any]] = []

    def _maybe_raise(self) -> None:
        if self.error is not None:
            raise self.error

    def list_models(self) -> List[ModelDescriptor]:
        self.list_calls += 1
        self._maybe_raise()
        return list(self.models)

    def create_chat_completion(self, payload: Dict[str, Any]) -> Any:
        self.payloads.append(payload)
        self._maybe_raise()
        return self.chat_response

    def create_chat_completion_streamed(self, payload: Dict[str, Any]) -> Iterator[Any]:
        self.payloads.append(payload)
        if self.stream_error_after is None:
            self._maybe_raise()
        for i, item in enumerate(self.chunks):
            if self.stream_error_after is not None and i == self.stream_error_after:
                self._maybe_raise()
            yield item

    async def create_chat_completion_streamed_async(self, payload: Dict[str, Any]):
        self.payloads.append(payload)
        self._maybe_raise()
        for item in self.chunks:
            yield item

    def create_embedding(self, payload: Dict[str, Any]) -> Any:
        self.payloads.append(payload)
        self._maybe_raise()
        return self.embedding_response


def model(id: str, owned_by: str = "mittwald") -> ModelDescriptor:
    return ModelDescriptor(id=id, owned_by=owned_by)


def chunk(
    *,
    role: Optional[str] = None,
    content: Optional[str] = None,
    finish_reason: Optional[str] = None,
    tool_calls: Optional[List[Dict[str, Any]]] = None,
    usage: Optional[Dict[str, Any]] = None,
    empty_choices: bool = False,
) -> Dict[str, Any]:
    """Build a raw chunk mapping shaped like the vendor's SSE payload."""
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    if tool_calls is not None:
        delta["tool_calls"] = tool_calls
    raw: Dict[str, Any] = {
        "choices": [] if empty_choices else [{"index": 0, "delta": delta, "finish_reason": finish_reason}]
    }
    if usage is not None:
        raw["usage"] = usage
    return raw


def completion(content: Optional[str] = "Hello", *, tool_calls: Optional[List[Any]] = None, usage: Any = None):
    """Build a non-streamed completion object with attribute access, like the SDK's."""
    message = SimpleNamespace(role="assistant", content=content, tool_calls=tool_calls)
    return SimpleNamespace(
        choices=[SimpleNamespace(message=message, finish_reason="tool_calls" if tool_calls else "stop")],
        usage=usage,
    )


def tool_call(id: str, name: str, arguments: str):
    return SimpleNamespace(id=id, type="function", function=SimpleNamespace(name=name, arguments=arguments))


def embedding(vector: List[float], usage: Any = None):
    return SimpleNamespace(data=[SimpleNamespace(embedding=vector, index=0)], usage=usage)
