"""Streaming package.

Exposes the stream aggregator, the lazy single-pass output wrapper and the
async aggregation helper under a single namespace.
"""

from .aggregator import (
    AggregatedChatResult,
    StreamAggregator,
    StreamState,
    build_tool_calls,
    decode_tool_arguments,
)
from .async_aggregate import aggregate_chunks_async
from .streamed_output import StreamedChatOutput

__all__ = [
    "AggregatedChatResult",
    "StreamAggregator",
    "StreamState",
    "StreamedChatOutput",
    "aggregate_chunks_async",
    "build_tool_calls",
    "decode_tool_arguments",
]
