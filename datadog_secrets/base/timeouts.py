"""Centralized timeout configuration for provider calls.

All outbound Datadog requests take their timeout from
:func:`get_timeout_config`; no other module introduces numeric timeout
literals. The values are per-phase ``httpx`` timeouts, not a wall-clock
budget: each connect, read, write and pool wait is bounded separately, so a
single request may take longer than the configured value in total when it
spends time in several phases or receives a slow trickle of bytes.

Supported environment variables (all optional):
    DD_SECRETS_HTTP_TIMEOUT_SECONDS
        Read, write and pool timeout applied to each request (default 10s).
    DD_SECRETS_CONNECT_TIMEOUT_SECONDS
        Connect-phase timeout (defaults to, and is capped at, the HTTP timeout).

The parsed configuration is cached per process and refreshed only when the
relevant environment variables change, which keeps access side-effect free
for deterministic tests.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from ..config.defaults import DATADOG_HTTP_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-phase read, write and pool timeout for each
            provider request.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = DATADOG_HTTP_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DATADOG_HTTP_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [
            os.getenv("DD_SECRETS_HTTP_TIMEOUT_SECONDS", ""),
            os.getenv("DD_SECRETS_CONNECT_TIMEOUT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    http = _parse_env_float("DD_SECRETS_HTTP_TIMEOUT_SECONDS", DATADOG_HTTP_TIMEOUT_SECONDS)
    connect = _parse_env_float("DD_SECRETS_CONNECT_TIMEOUT_SECONDS", http)
    _CACHED = TimeoutConfig(http_timeout_seconds=http, connect_timeout_seconds=min(connect, http))
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
