"""
One unit of a streamed chat response.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .tool_call_delta import ToolCallDelta


@dataclass
class StreamedChatChunk:
    """A partial chat response; every field is optional.

    Attributes:
        role: Role announced by the chunk (usually only the first one).
        content: Text delta.
        tool_calls: Tool call fragments.
        finish_reason: Finish reason, present on the closing chunk.
        usage: Cumulative usage snapshot keyed by :class:`TokenUsage` field
            name. A ``None`` value (or a missing key) means "not reported in
            this chunk".
        raw: The vendor chunk.
    """

    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: List[ToolCallDelta] = field(default_factory=list)
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, Optional[int]]] = None
    raw: Optional[Any] = None


__all__ = ["StreamedChatChunk"]
