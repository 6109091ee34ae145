"""Asynchronous aggregation of a streamed chat response.

The async form awaits the chunk source to completion and returns the
materialized result; it has no lazily consumable counterpart.
"""

from __future__ import annotations

from typing import AsyncIterable, Optional

from ..models import ChatOutput, StreamedChatChunk
from .aggregator import StreamAggregator


async def aggregate_chunks_async(
    chunks: AsyncIterable[StreamedChatChunk],
    aggregator: Optional[StreamAggregator] = None,
) -> ChatOutput:
    """Consume ``chunks`` fully and return the aggregated :class:`ChatOutput`."""
    agg = aggregator or StreamAggregator()
    async for chunk in chunks:
        agg.feed(chunk)
    agg.close()
    return agg.reconstruct_output()


__all__ = ["aggregate_chunks_async"]
