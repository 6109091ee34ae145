"""Streaming translation helpers for the mittwald adapter.

Pure functions turning raw chunks from the ``openai`` SDK (or plain
mappings of the same shape) into :class:`StreamedChatChunk` values. They
perform no I/O and never raise: malformed or partial chunks translate into an
empty chunk, which the aggregator treats as a no-op.

The final chunk of a stream requested with ``include_usage`` carries usage
and an empty ``choices`` list.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from ..base.models import StreamedChatChunk, ToolCallDelta
from ..base.tokens import extract_usage_fields


def _get(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _first_choice(raw: Any) -> Any:
    choices = _get(raw, "choices")
    if isinstance(choices, Sequence) and not isinstance(choices, (str, bytes)) and choices:
        return choices[0]
    return None


def translate_tool_call_deltas(raw_calls: Any) -> List[ToolCallDelta]:
    """Translate ``delta.tool_calls`` entries; a missing index falls back to the position."""
    if not isinstance(raw_calls, Sequence) or isinstance(raw_calls, (str, bytes)):
        return []
    out: List[ToolCallDelta] = []
    for position, item in enumerate(raw_calls):
        index = _get(item, "index")
        if not isinstance(index, int) or isinstance(index, bool):
            index = position
        function = _get(item, "function")
        out.append(
            ToolCallDelta(
                index=index,
                id=_str_or_none(_get(item, "id")),
                name=_str_or_none(_get(function, "name")),
                arguments=_str_or_none(_get(function, "arguments")) or "",
            )
        )
    return out


def translate_chunk(raw: Any) -> StreamedChatChunk:
    """Translate one raw SDK chunk into a :class:`StreamedChatChunk`."""
    chunk = StreamedChatChunk(raw=raw)
    choice = _first_choice(raw)
    if choice is not None:
        delta = _get(choice, "delta")
        chunk.role = _str_or_none(_get(delta, "role"))
        chunk.content = _str_or_none(_get(delta, "content"))
        chunk.tool_calls = translate_tool_call_deltas(_get(delta, "tool_calls"))
        chunk.finish_reason = _str_or_none(_get(choice, "finish_reason"))
    usage = _get(raw, "usage")
    if usage is not None:
        chunk.usage = extract_usage_fields(usage)
    return chunk


__all__ = ["translate_chunk", "translate_tool_call_deltas"]
