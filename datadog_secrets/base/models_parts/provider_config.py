"""Datadog admin credential pair used to authenticate the engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, repr=False)
class ProviderConfig:
    """Singleton admin configuration stored under the ``config`` key.

    Attributes:
        api_key: Datadog admin API key (sent as ``DD-API-KEY``).
        app_key: Datadog admin application key (sent as ``DD-APPLICATION-KEY``).
    """

    api_key: str
    app_key: str

    def to_dict(self) -> Dict[str, Any]:
        return {"api_key": self.api_key, "app_key": self.app_key}

    def __repr__(self) -> str:
        # Admin keys must never end up in logs or tracebacks.
        return "ProviderConfig(api_key='***', app_key='***')"


__all__ = ["ProviderConfig"]
