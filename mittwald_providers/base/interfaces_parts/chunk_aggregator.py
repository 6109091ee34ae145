"""ChunkAggregator Protocol (single-class module).

Interface for folding streamed chunks into a final chat result.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatOutput, StreamedChatChunk


@runtime_checkable
class ChunkAggregator(Protocol):
    """Incremental assembler for one streamed response."""

    def feed(self, chunk: StreamedChatChunk) -> None:
        """Fold one chunk into the accumulated state."""
        ...

    def reconstruct_output(self) -> ChatOutput:
        """Return the final result once the stream has finished."""
        ...
