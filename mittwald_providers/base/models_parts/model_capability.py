"""
Model capability tags.

Capabilities are requested by the caller to narrow a model catalog. They are a
pure filter predicate and are never persisted.
"""
from __future__ import annotations

from enum import Enum


class ModelCapability(str, Enum):
    """Capability tags a caller may request when listing models.

    ``CHAT_TOOLS`` and ``CHAT_STRUCTURED_RESPONSE`` are accepted for host
    compatibility but do not narrow the catalog.
    """

    CHAT_WITH_IMAGE_VISION = "chat_with_image_vision"
    CHAT_JSON_OUTPUT = "chat_json_output"
    CHAT_WITH_AUDIO = "chat_with_audio"
    CHAT_WITH_VIDEO = "chat_with_video"
    CHAT_TOOLS = "chat_tools"
    CHAT_STRUCTURED_RESPONSE = "chat_structured_response"


__all__ = ["ModelCapability"]
