"""
ChatOutput DTO representing a materialized chat result.

The ``raw`` field keeps the vendor response for debugging but is excluded from
default serialization so large objects are not logged by accident.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .message import ChatMessage
from .token_usage import TokenUsage


@dataclass
class ChatOutput:
    """Final chat result.

    Attributes:
        message: The assistant message (text and tool calls).
        raw: Vendor response, or the aggregated stream state for streamed calls.
        usage: Token usage counters.
        finish_reason: Vendor finish reason when known.
    """

    message: ChatMessage
    raw: Optional[Any] = None
    usage: TokenUsage = field(default_factory=TokenUsage)
    finish_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding the raw vendor object."""
        return {
            "role": self.message.role,
            "text": self.message.text,
            "tool_calls": [c.render() for c in self.message.tool_calls],
            "usage": self.usage.to_dict(),
            "finish_reason": self.finish_reason,
        }


__all__ = [
    "ChatOutput",
]
