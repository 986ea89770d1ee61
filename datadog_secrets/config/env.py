"""datadog_secrets.config.env
=========================

Environment-driven settings for the secrets engine.

Purpose
-------
- Provide a single source of truth for the ``DD_SECRETS_*`` environment
  variables understood by the package.
- Resolve them once per call into an immutable :class:`EngineSettings`
  snapshot so the rest of the code never reads ``os.environ`` directly.

Supported variables (all optional)
----------------------------------
DD_SECRETS_DATADOG_BASE_URL
    Datadog API base URL (defaults to the US1 v1 endpoint).
DD_SECRETS_STORAGE
    ``memory`` or ``sqlite`` (default ``sqlite``).
DD_SECRETS_DB_PATH
    SQLite database path when the sqlite storage is selected.
DD_SECRETS_USE_MOCKS
    Truthy value selects the in-process mock Datadog client.
DD_SECRETS_CLEANUP_PARTIAL
    Truthy value enables best-effort deletion of an already minted API key
    when the application key call fails under the ``both`` key type.

Failure Modes
-------------
Helpers never raise on unset or malformed values; they fall back to the
defaults in :mod:`datadog_secrets.config.defaults`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .defaults import DATADOG_DEFAULT_BASE_URL

ENV_PREFIX = "DD_SECRETS_"

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Return True when environment variable ``name`` holds a truthy value."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a stripped, non-empty environment value or ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class EngineSettings:
    """Resolved runtime settings.

    Attributes:
        base_url: Datadog API base URL used by new provider clients.
        storage: Storage backend selector (``"memory"`` or ``"sqlite"``).
        db_path: Optional SQLite path; ``None`` means the engine default.
        use_mocks: Use :class:`~datadog_secrets.mock.MockDatadogClient`.
        cleanup_on_partial_failure: Delete an orphaned API key when the
            second call of a ``both`` issuance fails.
    """

    base_url: str = DATADOG_DEFAULT_BASE_URL
    storage: str = "sqlite"
    db_path: Optional[str] = None
    use_mocks: bool = False
    cleanup_on_partial_failure: bool = False


def load_settings() -> EngineSettings:
    """Build an :class:`EngineSettings` snapshot from the environment."""
    storage = (env_str(f"{ENV_PREFIX}STORAGE", "sqlite") or "sqlite").lower()
    if storage not in ("memory", "sqlite"):
        storage = "sqlite"
    return EngineSettings(
        base_url=(env_str(f"{ENV_PREFIX}DATADOG_BASE_URL", DATADOG_DEFAULT_BASE_URL) or DATADOG_DEFAULT_BASE_URL).rstrip("/"),
        storage=storage,
        db_path=env_str(f"{ENV_PREFIX}DB_PATH"),
        use_mocks=env_flag(f"{ENV_PREFIX}USE_MOCKS"),
        cleanup_on_partial_failure=env_flag(f"{ENV_PREFIX}CLEANUP_PARTIAL"),
    )


__all__ = ["ENV_PREFIX", "EngineSettings", "env_flag", "env_str", "load_settings"]
