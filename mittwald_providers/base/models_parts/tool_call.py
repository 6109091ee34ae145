"""
Tool call issued by the model.

Used in two directions: decoded from vendor responses, and rendered back into
an assistant message when a conversation replays earlier tool use.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .tool_function import ToolFunction


@dataclass
class ToolCall:
    """A single function call requested by the model.

    Attributes:
        id: Vendor tool call id; tool result messages refer back to it.
        name: Name of the called function.
        arguments: Decoded JSON arguments.
        function: The requesting :class:`ToolFunction`, when it could be
            matched by name.
    """

    id: str
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    function: Optional[ToolFunction] = None

    def render(self) -> Dict[str, Any]:
        """Return the OpenAI-style ``tool_calls`` entry for this call."""
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": json.dumps(self.arguments)},
        }


__all__ = ["ToolCall"]
