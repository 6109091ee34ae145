"""ChatTransport Protocol (single-class module).

The outbound boundary to the vendor HTTP API. Implementations own the SDK
client; nothing above this protocol touches SDK objects other than as opaque
``raw`` values.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Iterator, List, Protocol, runtime_checkable

from ..models import ModelDescriptor


@runtime_checkable
class ChatTransport(Protocol):
    """Vendor API operations used by the adapter."""

    def list_models(self) -> List[ModelDescriptor]:
        """Return every model the vendor lists for the credential."""
        ...

    def create_chat_completion(self, payload: Dict[str, Any]) -> Any:
        """Execute a non-streamed chat completion and return the raw response."""
        ...

    def create_chat_completion_streamed(self, payload: Dict[str, Any]) -> Iterator[Any]:
        """Execute a streamed chat completion, yielding raw chunks lazily."""
        ...

    def create_chat_completion_streamed_async(self, payload: Dict[str, Any]) -> AsyncIterator[Any]:
        """Asynchronous variant of :meth:`create_chat_completion_streamed`."""
        ...

    def create_embedding(self, payload: Dict[str, Any]) -> Any:
        """Execute an embeddings call and return the raw response."""
        ...
