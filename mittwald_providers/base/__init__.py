"""
Providers Base Package

Provider-agnostic building blocks used by the mittwald adapter:
- Interfaces: protocols at the adapter's collaborator boundaries
- Models (DTOs): serialization-friendly input/output objects
- Errors: normalized error taxonomy and classification
- Repositories: credential resolution
- Streaming: chunk aggregation
"""

from .cache import InMemoryCacheStore
from .errors import (
    ErrorCode,
    NotImplementedOperationError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    SetupFailureError,
    classify_exception,
    raise_classified,
)
from .interfaces import (
    CacheStore,
    ChatTransport,
    ChunkAggregator,
    CredentialResolver,
    ModelCatalogSource,
    Notifier,
    RequestBuilder,
)
from .models import (
    ChatFile,
    ChatInput,
    ChatMessage,
    ChatOutput,
    EmbeddingsInput,
    EmbeddingsOutput,
    ModelCapability,
    ModelDescriptor,
    OperationType,
    StreamedChatChunk,
    TokenUsage,
    ToolCall,
    ToolFunction,
)
from .repositories.keys import KeyResolution, KeysRepository
from .streaming import StreamAggregator, StreamedChatOutput, StreamState, aggregate_chunks_async

__all__ = [
    # Models
    "OperationType",
    "ModelCapability",
    "ModelDescriptor",
    "TokenUsage",
    "ChatFile",
    "ToolFunction",
    "ToolCall",
    "ChatMessage",
    "ChatInput",
    "ChatOutput",
    "StreamedChatChunk",
    "EmbeddingsInput",
    "EmbeddingsOutput",
    # Errors
    "ErrorCode",
    "ProviderError",
    "RateLimitError",
    "QuotaExceededError",
    "SetupFailureError",
    "NotImplementedOperationError",
    "classify_exception",
    "raise_classified",
    # Interfaces
    "ModelCatalogSource",
    "RequestBuilder",
    "ChunkAggregator",
    "ChatTransport",
    "CacheStore",
    "CredentialResolver",
    "Notifier",
    # Repositories
    "KeysRepository",
    "KeyResolution",
    # Cache
    "InMemoryCacheStore",
    # Streaming
    "StreamAggregator",
    "StreamState",
    "StreamedChatOutput",
    "aggregate_chunks_async",
]
