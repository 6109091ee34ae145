"""Non-streamed response materialization for the mittwald adapter.

Converts raw chat completion and embedding responses (SDK objects or plain
mappings) into :class:`ChatOutput` and :class:`EmbeddingsOutput`. Usage is
read once from the response.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from ..base.models import ChatInput, ChatMessage, ChatOutput, EmbeddingsOutput, TokenUsage, ToolCallDelta
from ..base.streaming import build_tool_calls
from ..base.tokens import extract_token_usage


def _get(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(seq: Any) -> Any:
    if isinstance(seq, Sequence) and not isinstance(seq, (str, bytes)) and seq:
        return seq[0]
    return None


def chat_output_from_response(response: Any, input: Any = None) -> ChatOutput:
    """Materialize a non-streamed chat completion.

    Tool calls are decoded from their JSON argument strings and linked to the
    matching tool definitions of ``input`` by function name.
    """
    choice = _first(_get(response, "choices"))
    message = _get(choice, "message")
    tools = input.tools if isinstance(input, ChatInput) else ()

    fragments: List[ToolCallDelta] = []
    for index, call in enumerate(_get(message, "tool_calls") or ()):
        function = _get(call, "function")
        fragments.append(
            ToolCallDelta(
                index=index,
                id=_get(call, "id"),
                name=_get(function, "name"),
                arguments=_get(function, "arguments") or "",
            )
        )

    chat_message = ChatMessage(
        role=_get(message, "role") or "assistant",
        text=_get(message, "content") or "",
        tool_calls=build_tool_calls(fragments, tools),
    )
    return ChatOutput(
        message=chat_message,
        raw=response,
        usage=extract_token_usage(response) or TokenUsage(),
        finish_reason=_get(choice, "finish_reason"),
    )


def embeddings_output_from_response(response: Any) -> EmbeddingsOutput:
    """Materialize an embeddings response; the first embedding is returned."""
    item = _first(_get(response, "data"))
    vector = [float(v) for v in (_get(item, "embedding") or ())]
    return EmbeddingsOutput(vector=vector, raw=response, usage=extract_token_usage(response) or TokenUsage())


__all__ = ["chat_output_from_response", "embeddings_output_from_response"]
