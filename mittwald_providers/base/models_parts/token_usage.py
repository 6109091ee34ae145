"""
Token usage counters.

Carries the four-way usage breakdown reported by the vendor (input, output,
reasoning, cached) plus the vendor total. Counters are never negative and
default to zero when the vendor omits them.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class TokenUsage:
    """Token usage snapshot for one call or one streamed chunk."""

    input: int = 0
    output: int = 0
    total: int = 0
    reasoning: int = 0
    cached: int = 0

    def __post_init__(self) -> None:
        for name in ("input", "output", "total", "reasoning", "cached"):
            if getattr(self, name) < 0:
                setattr(self, name, 0)

    def to_dict(self) -> Dict[str, int]:
        """Return a JSON-serializable dictionary of the counters."""
        return asdict(self)


__all__ = ["TokenUsage"]
