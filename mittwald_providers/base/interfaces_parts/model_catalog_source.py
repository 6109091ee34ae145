"""ModelCatalogSource Protocol (single-class module).

Interface for components that resolve the model ids usable for an operation.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol, runtime_checkable

from ..models import ModelCapability, OperationType


@runtime_checkable
class ModelCatalogSource(Protocol):
    """Resolve vendor model ids for an operation type and capability set."""

    def resolve(
        self,
        operation_type: OperationType,
        capabilities: Iterable[ModelCapability] = (),
    ) -> List[str]:
        """Return sorted, de-duplicated model ids.

        An empty list means no model qualifies; it is a normal result and not
        an error.
        """
        ...
