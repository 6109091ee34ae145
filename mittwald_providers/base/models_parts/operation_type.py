"""
Operation type enumeration.

An operation type is the category of AI task a host asks for. It selects the
model catalog filter and the payload shape used by the adapter.
"""
from __future__ import annotations

from enum import Enum


class OperationType(str, Enum):
    """Operation types known to the adapter (values are the host-facing keys)."""

    CHAT = "chat"
    EMBEDDINGS = "embeddings"
    MODERATION = "moderation"
    TEXT_TO_IMAGE = "text_to_image"
    TEXT_TO_SPEECH = "text_to_speech"
    SPEECH_TO_TEXT = "speech_to_text"


__all__ = ["OperationType"]
