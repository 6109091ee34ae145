"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`mittwald_providers.base.models_parts` if needed, while
`mittwald_providers.base.models` remains the primary stable import path.
"""

from .operation_type import OperationType
from .model_capability import ModelCapability
from .model_descriptor import ModelDescriptor
from .token_usage import TokenUsage
from .chat_file import ChatFile
from .tool_function import ToolFunction
from .tool_call import ToolCall
from .tool_call_delta import ToolCallDelta
from .message import ChatMessage, Role
from .chat_input import ChatInput
from .chat_output import ChatOutput
from .streamed_chat_chunk import StreamedChatChunk
from .embeddings_input import EmbeddingsInput
from .embeddings_output import EmbeddingsOutput

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
