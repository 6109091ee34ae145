"""CredentialResolver Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class CredentialResolver(Protocol):
    """Turn a credential identifier into the secret it names."""

    def resolve(self, identifier: str) -> Optional[str]:
        """Return the secret, or ``None`` when it cannot be found."""
        ...
