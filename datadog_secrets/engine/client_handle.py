"""Lazily constructed, atomically swappable provider client.

The engine is reconstructed per request but the provider client is shared,
read-mostly state: it is built on first use from the stored configuration
and cached until configuration changes. Construction and invalidation happen
under one lock, and readers only ever observe a complete client reference,
so concurrent requests see either the old or the new client.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ..base.errors import NotConfiguredError
from ..base.interfaces import IKeyProvider
from ..base.models import ProviderConfig

ClientFactory = Callable[[ProviderConfig], IKeyProvider]
ConfigLoader = Callable[[], Optional[ProviderConfig]]


class ClientHandle:
    """Holder for the cached :class:`IKeyProvider`.

    Parameters
    ----------
    factory:
        Builds a client from a :class:`ProviderConfig`.
    loader:
        Reads the current configuration (``None`` when unset).
    """

    def __init__(self, factory: ClientFactory, loader: ConfigLoader) -> None:
        self._factory = factory
        self._loader = loader
        self._lock = threading.Lock()
        self._client: Optional[IKeyProvider] = None

    @property
    def cached(self) -> Optional[IKeyProvider]:
        return self._client

    def get(self) -> IKeyProvider:
        """Return the cached client, building it from configuration if needed.

        Raises:
            NotConfiguredError: when no configuration is stored.
            StorageError: when the configuration cannot be read.
        """
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                config = self._loader()
                if config is None:
                    raise NotConfiguredError()
                self._client = self._factory(config)
            return self._client

    def invalidate(self) -> None:
        """Drop the cached client; the next :meth:`get` rebuilds from storage."""
        with self._lock:
            self._client = None


__all__ = ["ClientHandle", "ClientFactory", "ConfigLoader"]
