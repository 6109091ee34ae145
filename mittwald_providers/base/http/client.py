"""Shared HTTP client pool.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances for the direct HTTP calls the adapter makes outside the
    ``openai`` SDK (the rate limit probe).

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by ``purpose``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict

import httpx

from ...config.defaults import HTTP_TIMEOUT_SECONDS

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose``, creating it on first use."""
    client = _CLIENTS.get(purpose)
    if client is not None and not client.is_closed:
        return client
    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is None or client.is_closed:
            client = httpx.Client(timeout=HTTP_TIMEOUT_SECONDS)
            _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
