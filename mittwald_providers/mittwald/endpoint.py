"""Endpoint resolution for the mittwald API."""

from __future__ import annotations

from typing import Optional

from ..config.defaults import DEFAULT_ENDPOINT, DEFAULT_SCHEME


def resolve_endpoint(host: Optional[str] = None) -> str:
    """Return the API base URL for ``host`` or the default endpoint.

    A scheme is added when missing and trailing slashes are dropped, so
    ``llm.example.test/v1/`` becomes ``https://llm.example.test/v1``.
    """
    target = (host or "").strip() or DEFAULT_ENDPOINT
    if "://" not in target:
        target = DEFAULT_SCHEME + target
    return target.rstrip("/")


__all__ = ["resolve_endpoint"]
