"""
Tool (function) definition offered to the model.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ToolFunction:
    """A callable function the model may request.

    Attributes:
        name: Function name as exposed to the model.
        description: Optional human readable description.
        parameters: JSON Schema describing the arguments object.
    """

    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    def render(self) -> Dict[str, Any]:
        """Return the OpenAI-style ``tools`` entry for this function."""
        function: Dict[str, Any] = {"name": self.name, "parameters": self.parameters}
        if self.description:
            function["description"] = self.description
        return {"type": "function", "function": function}


__all__ = ["ToolFunction"]
