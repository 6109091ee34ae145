"""
ChatInput DTO for operation-agnostic chat invocations.

The request builder maps this shape to the vendor payload. Besides the
conversation it may carry tool definitions and a JSON schema requesting
structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import ChatMessage
from .tool_function import ToolFunction


@dataclass
class ChatInput:
    """Normalized chat input.

    Attributes:
        messages: Ordered conversation.
        tools: Optional functions the model may call.
        json_schema: Optional ``json_schema`` response format body
            (``{"name": ..., "schema": {...}}``).
    """

    messages: List[ChatMessage]
    tools: List[ToolFunction] = field(default_factory=list)
    json_schema: Optional[Dict[str, Any]] = None

    def function_by_name(self, name: str) -> Optional[ToolFunction]:
        """Return the tool definition called ``name``, if offered."""
        return next((t for t in self.tools if t.name == name), None)


__all__ = [
    "ChatInput",
]
