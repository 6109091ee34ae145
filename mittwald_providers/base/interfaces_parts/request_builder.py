"""RequestBuilder Protocol (single-class module).

Interface for turning operation-agnostic input into a vendor payload.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from ..models import OperationType


@runtime_checkable
class RequestBuilder(Protocol):
    """Build outbound request payloads; implementations must be pure."""

    def build(
        self,
        operation_type: OperationType,
        model_id: str,
        input: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Return a fresh payload mapping for one vendor call."""
        ...
