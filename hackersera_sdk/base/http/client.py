"""Shared HTTP client pool.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances so
    several ``HackersEraClient`` objects pointed at the same service share one
    connection pool instead of allocating their own.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - Pooled clients are created with the bounded timeout from
      :func:`get_timeout_config`. The transport still passes an explicit
      per-request timeout (bounded or streaming), so the client default only
      matters for callers using the pooled client directly.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``.
    - All clients are closed at interpreter exit via ``atexit``; tests and
      applications may call :func:`close_all_clients` earlier.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str = "api") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Service base URL associated with the client. ``None`` groups
            clients under a shared key.
        purpose: Short discriminator for separate pools. Keep stable to
            maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant
        lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().bounded_timeout()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for c in clients:
        c.close()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
