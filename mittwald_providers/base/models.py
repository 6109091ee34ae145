"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``mittwald_providers.base.models_parts``.
"""

from .models_parts import (
    ChatFile,
    ChatInput,
    ChatMessage,
    ChatOutput,
    EmbeddingsInput,
    EmbeddingsOutput,
    ModelCapability,
    ModelDescriptor,
    OperationType,
    Role,
    StreamedChatChunk,
    TokenUsage,
    ToolCall,
    ToolCallDelta,
    ToolFunction,
)

__all__ = [
    "OperationType",
    "ModelCapability",
    "ModelDescriptor",
    "TokenUsage",
    "ChatFile",
    "ToolFunction",
    "ToolCall",
    "ToolCallDelta",
    "ChatMessage",
    "Role",
    "ChatInput",
    "ChatOutput",
    "StreamedChatChunk",
    "EmbeddingsInput",
    "EmbeddingsOutput",
]
