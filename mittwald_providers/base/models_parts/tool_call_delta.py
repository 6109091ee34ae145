"""
Partial tool call carried by a streamed chunk.

The vendor sends the id and function name once, then argument JSON in
fragments; fragments are keyed by ``index``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ToolCallDelta:
    """One streamed tool call fragment."""

    index: int
    id: Optional[str] = None
    name: Optional[str] = None
    arguments: str = ""


__all__ = ["ToolCallDelta"]
