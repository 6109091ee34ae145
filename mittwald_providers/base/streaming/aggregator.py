"""Incremental assembly of streamed chat responses.

A :class:`StreamAggregator` is owned by exactly one streamed call and moves
through ``OPEN -> ACCUMULATING -> FINISHED``:

- role: the first non-empty value wins and sticks;
- content deltas are appended in arrival order;
- tool call fragments are merged by index (id and name are set once,
  argument fragments are concatenated);
- the finish reason is recorded the first time it is non-empty, which moves
  the aggregator to ``FINISHED``; later chunks may still carry usage;
- usage counters are overwritten, never summed, because the vendor reports
  cumulative totals.

Malformed chunks are no-ops. The aggregate is readable at any time through
:attr:`StreamAggregator.result`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..models import (
    ChatMessage,
    ChatOutput,
    StreamedChatChunk,
    TokenUsage,
    ToolCall,
    ToolCallDelta,
    ToolFunction,
)

_USAGE_FIELDS = ("input", "output", "total", "reasoning", "cached")


class StreamState(str, Enum):
    """Lifecycle of one aggregator."""

    OPEN = "open"
    ACCUMULATING = "accumulating"
    FINISHED = "finished"


@dataclass
class AggregatedChatResult:
    """Mutable accumulator exposed for progressive consumption."""

    role: Optional[str] = None
    content: str = ""
    tool_calls: Dict[int, ToolCallDelta] = field(default_factory=dict)
    finish_reason: Optional[str] = None
    usage: TokenUsage = field(default_factory=TokenUsage)
    chunks: int = 0


def decode_tool_arguments(arguments: str) -> Dict[str, Any]:
    """Decode a tool call's JSON argument string.

    Empty or undecodable input yields an empty mapping; a JSON value that is
    not an object is wrapped as ``{"value": ...}``.
    """
    if not arguments or not arguments.strip():
        return {}
    try:
        decoded = json.loads(arguments)
    except ValueError:
        return {}
    return decoded if isinstance(decoded, dict) else {"value": decoded}


def build_tool_calls(
    fragments: Sequence[ToolCallDelta],
    tools: Sequence[ToolFunction] = (),
) -> List[ToolCall]:
    """Turn merged fragments into :class:`ToolCall` objects linked to ``tools`` by name."""
    by_name = {t.name: t for t in tools}
    calls: List[ToolCall] = []
    for frag in fragments:
        name = frag.name or ""
        calls.append(
            ToolCall(
                id=frag.id or "",
                name=name,
                arguments=decode_tool_arguments(frag.arguments),
                function=by_name.get(name),
            )
        )
    return calls


class StreamAggregator:
    """Fold :class:`StreamedChatChunk` values into one chat result."""

    def __init__(self, tools: Sequence[ToolFunction] = ()) -> None:
        self._tools = list(tools)
        self._state = StreamState.OPEN
        self._result = AggregatedChatResult()

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def result(self) -> AggregatedChatResult:
        """The aggregate so far; valid in every state."""
        return self._result

    @property
    def finished(self) -> bool:
        return self._state is StreamState.FINISHED

    def feed(self, chunk: Any) -> None:
        """Fold one chunk into the accumulated state.

        Anything that is not a :class:`StreamedChatChunk` is ignored.
        """
        if not isinstance(chunk, StreamedChatChunk):
            return
        res = self._result
        res.chunks += 1
        if self._state is StreamState.OPEN:
            self._state = StreamState.ACCUMULATING

        if res.role is None and isinstance(chunk.role, str) and chunk.role:
            res.role = chunk.role
        if isinstance(chunk.content, str) and chunk.content:
            res.content += chunk.content
        for delta in chunk.tool_calls or ():
            self._merge_tool_call(delta)
        if chunk.usage:
            self._overwrite_usage(chunk.usage)
        if res.finish_reason is None and isinstance(chunk.finish_reason, str) and chunk.finish_reason:
            res.finish_reason = chunk.finish_reason
            self._state = StreamState.FINISHED

    def _merge_tool_call(self, delta: Any) -> None:
        if not isinstance(delta, ToolCallDelta) or not isinstance(delta.index, int):
            return
        current = self._result.tool_calls.get(delta.index)
        if current is None:
            current = ToolCallDelta(index=delta.index)
            self._result.tool_calls[delta.index] = current
        if current.id is None and delta.id:
            current.id = delta.id
        if current.name is None and delta.name:
            current.name = delta.name
        if delta.arguments:
            current.arguments += delta.arguments

    def _overwrite_usage(self, usage: Mapping[str, Optional[int]]) -> None:
        if not isinstance(usage, Mapping):
            return
        counters = self._result.usage
        for name in _USAGE_FIELDS:
            value = usage.get(name)
            if isinstance(value, int) and not isinstance(value, bool):
                setattr(counters, name, max(value, 0))

    def close(self) -> None:
        """Mark the source as exhausted.

        A stream that ends without a finish reason is still final; its
        ``finish_reason`` stays ``None``.
        """
        self._state = StreamState.FINISHED

    def reconstruct_output(self) -> ChatOutput:
        """Return the materialized :class:`ChatOutput`.

        Raises:
            RuntimeError: When no finish reason has been seen yet.
        """
        if not self.finished:
            raise RuntimeError("stream has not finished; no finish reason received")
        res = self._result
        fragments = [res.tool_calls[i] for i in sorted(res.tool_calls)]
        message = ChatMessage(
            role=res.role or "assistant",  # type: ignore[arg-type]
            text=res.content,
            tool_calls=build_tool_calls(fragments, self._tools),
        )
        usage = TokenUsage(**res.usage.to_dict())
        return ChatOutput(message=message, raw=res, usage=usage, finish_reason=res.finish_reason)


__all__ = [
    "StreamState",
    "AggregatedChatResult",
    "StreamAggregator",
    "build_tool_calls",
    "decode_tool_arguments",
]
