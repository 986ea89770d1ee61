"""Shared HTTP client pool for the Datadog provider client.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so that every short-lived provider client (one per admin
    credential pair) shares the same connection pool instead of opening new
    sockets per issuance.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - Each pooled client is built with an ``httpx.Timeout`` derived from
      :func:`get_timeout_config` at creation time.
    - The timeout is per phase: ``connect`` uses the connect timeout and
      ``read``, ``write`` and ``pool`` use the HTTP timeout. There is no
      overall deadline on a request.

Credentials:
    - Pooled clients carry no authentication headers. Admin credentials are
      attached per request by the provider client, so rotating the admin pair
      never requires touching the pool.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``.
    - All clients are closed at interpreter exit via ``atexit``; tests may call
      :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL set on the client so relative request
            paths can be used. ``None`` groups clients under a shared key.
        purpose: Short discriminator for separate pools (e.g. ``"datadog.keys"``).

    Returns:
        A reusable ``httpx.Client`` instance.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant lock.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        cfg = get_timeout_config()
        timeout = httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown; close errors are non-actionable
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
