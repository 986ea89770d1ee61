"""Configuration store adapter.

Reads and writes the singleton Datadog admin credential pair under the
``config`` storage key. No validation beyond shape: whether the keys are
accepted by Datadog is only discovered when the provider client is used.
"""

from __future__ import annotations

from typing import Optional

from ..base.errors import StorageError
from ..base.models import ProviderConfig
from ..config.defaults import CONFIG_STORAGE_KEY
from ..persistence.interfaces import IStorage
from .codec import decode_entry, encode_entry


class ConfigStore:
    """Typed adapter over an :class:`IStorage` for :class:`ProviderConfig`."""

    def __init__(self, storage: IStorage, key: str = CONFIG_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def read(self) -> Optional[ProviderConfig]:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        data = decode_entry(self._key, raw)
        api_key, app_key = data.get("api_key", ""), data.get("app_key", "")
        if not isinstance(api_key, str) or not isinstance(app_key, str):
            raise StorageError("corrupt config entry: keys must be strings", key=self._key)
        return ProviderConfig(api_key=api_key, app_key=app_key)

    def write(self, config: ProviderConfig) -> None:
        self._storage.put(self._key, encode_entry(config.to_dict()))

    def delete(self) -> None:
        self._storage.delete(self._key)


__all__ = ["ConfigStore"]
