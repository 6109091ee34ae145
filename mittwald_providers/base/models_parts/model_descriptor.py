"""
ModelDescriptor DTO for vendor model listings.

Only the fields needed for catalog filtering are kept: the opaque model id and
the ``owned_by`` tag used to exclude internal entries.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ModelDescriptor:
    """A single vendor model listing entry.

    Attributes:
        id: Vendor model identifier (opaque string).
        owned_by: Owner tag reported by the vendor (``"openai-dev"`` marks
            internal entries).
    """

    id: str
    owned_by: Optional[str] = None

    @classmethod
    def from_raw(cls, item: Any) -> "ModelDescriptor":
        """Build a descriptor from an SDK object or a plain mapping."""
        if isinstance(item, Mapping):
            return cls(id=str(item.get("id", "")), owned_by=item.get("owned_by"))
        return cls(id=str(getattr(item, "id", "")), owned_by=getattr(item, "owned_by", None))


__all__ = ["ModelDescriptor"]
