"""Embeddings input DTO."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EmbeddingsInput:
    """Text to embed."""

    prompt: str


__all__ = ["EmbeddingsInput"]
