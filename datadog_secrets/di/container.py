"""Minimal dependency injection container for the secrets engine.

Goals:
- Centralize construction of the storage view, provider client factory and
  the backend facade from one :class:`EngineSettings` snapshot.
- Keep the HTTP service and the development server free of wiring logic.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Optional

from ..config import EngineSettings, load_settings
from ..datadog import DatadogClient
from ..engine import DatadogSecretsBackend
from ..engine.client_handle import ClientFactory
from ..mock import MockDatadogClient
from ..persistence import InMemoryStorage, IStorage, SqliteStorage
from ..persistence.sqlite import create_connection, init_schema


class EngineContainer:
    """Builds and caches the engine's shared singletons.

    Args:
        settings: Resolved settings; read from the environment when omitted.
    """

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings or load_settings()
        self._singletons: Dict[str, Any] = {}

    # ---- Shared singletons ----
    def storage(self) -> IStorage:
        """Return the shared storage view selected by ``settings.storage``."""
        if "storage" not in self._singletons:
            if self.settings.storage == "memory":
                self._singletons["storage"] = InMemoryStorage()
            else:
                conn = create_connection(self.settings.db_path)
                init_schema(conn)
                self._singletons["storage"] = SqliteStorage(conn)
        return self._singletons["storage"]

    def client_factory(self) -> ClientFactory:
        """Return the provider client factory (mock when ``use_mocks``)."""
        if self.settings.use_mocks:
            return MockDatadogClient.from_config
        return partial(DatadogClient.from_config, base_url=self.settings.base_url)

    def backend(self) -> DatadogSecretsBackend:
        """Return the shared backend facade."""
        if "backend" not in self._singletons:
            self._singletons["backend"] = DatadogSecretsBackend(
                self.storage(),
                client_factory=self.client_factory(),
                base_url=self.settings.base_url,
                cleanup_on_partial_failure=self.settings.cleanup_on_partial_failure,
            )
        return self._singletons["backend"]

    def close(self) -> None:
        """Release the storage connection and clear cached singletons."""
        storage = self._singletons.get("storage")
        if isinstance(storage, SqliteStorage):
            storage.close()
        self._singletons.clear()


def build_container(settings: Optional[EngineSettings] = None) -> EngineContainer:
    """Construct and return a new :class:`EngineContainer`."""
    return EngineContainer(settings=settings)


__all__ = ["EngineContainer", "build_container"]
