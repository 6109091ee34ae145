"""Notifier Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Surface user-facing warnings to the host (admin notices, console, ...)."""

    def warning(self, message: str) -> None:
        """Display ``message`` as a warning."""
        ...
