"""Embeddings output DTO."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .token_usage import TokenUsage


@dataclass
class EmbeddingsOutput:
    """Embedding vector plus the raw vendor response.

    Attributes:
        vector: The embedding as 32-bit float values.
        raw: Vendor response for diagnostics.
        usage: Token usage (embeddings only report input and total).
    """

    vector: List[float]
    raw: Optional[Any] = None
    usage: TokenUsage = field(default_factory=TokenUsage)


__all__ = ["EmbeddingsOutput"]
