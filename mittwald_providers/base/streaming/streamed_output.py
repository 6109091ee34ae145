"""Lazy, single-pass wrapper around a streamed chat response.

:class:`StreamedChatOutput` is what ``chat(..., {"stream": True})`` returns.
Iterating it pulls chunks from the transport one at a time, feeds each one to
its :class:`StreamAggregator` and yields it to the caller. The sequence is not
restartable: a second iteration raises ``RuntimeError``. Callers that need the
chunk history must keep their own copy.

Errors raised by the underlying source (already classified by the adapter)
propagate out of the iteration unchanged.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..models import ChatOutput, StreamedChatChunk
from .aggregator import AggregatedChatResult, StreamAggregator


class StreamedChatOutput:
    """Lazily consumable chat result backed by a chunk iterator."""

    def __init__(self, chunks: Iterable[StreamedChatChunk], aggregator: Optional[StreamAggregator] = None) -> None:
        self._source: Iterator[StreamedChatChunk] = iter(chunks)
        self._aggregator = aggregator or StreamAggregator()
        self._started = False
        self._exhausted = False

    def __iter__(self) -> Iterator[StreamedChatChunk]:
        if self._started:
            raise RuntimeError("streamed chat output can only be iterated once")
        self._started = True
        return self._consume()

    def _consume(self) -> Iterator[StreamedChatChunk]:
        for chunk in self._source:
            self._aggregator.feed(chunk)
            yield chunk
        self._exhausted = True
        self._aggregator.close()

    @property
    def aggregate(self) -> AggregatedChatResult:
        """Progressive view of what has been received so far."""
        return self._aggregator.result

    @property
    def finish_reason(self) -> Optional[str]:
        """Finish reason once received; ``None`` while still streaming."""
        return self._aggregator.result.finish_reason

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def reconstruct_output(self) -> ChatOutput:
        """Drain the remaining chunks and return the final :class:`ChatOutput`.

        Works whether or not the caller iterated before; chunks already
        consumed are part of the aggregate.
        """
        if not self._started:
            self._started = True
            for _ in self._consume():
                pass
        elif not self._exhausted:
            for chunk in self._source:
                self._aggregator.feed(chunk)
            self._exhausted = True
            self._aggregator.close()
        return self._aggregator.reconstruct_output()


__all__ = ["StreamedChatOutput"]
