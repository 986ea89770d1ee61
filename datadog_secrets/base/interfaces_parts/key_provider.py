"""IKeyProvider Protocol (single-class module).

Contract the engine needs from the credential provider. Implemented by
``DatadogClient`` (HTTP) and ``MockDatadogClient`` (in-process).
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class IKeyProvider(Protocol):
    """Create and delete Datadog API/application keys.

    All four operations are synchronous and independently fallible; failures
    surface as :class:`~datadog_secrets.base.errors.ProviderError`. The admin
    credentials used to authenticate are fixed for the implementation's
    lifetime. No retries are performed.
    """

    def create_api_key(self, name: str) -> str:  # pragma: no cover - interface
        """Create an API key named ``name`` and return its value."""
        ...

    def create_app_key(self, name: str, scopes: Sequence[str]) -> str:  # pragma: no cover - interface
        """Create an application key with ``scopes`` and return its value."""
        ...

    def delete_api_key(self, key: str) -> None:  # pragma: no cover - interface
        """Delete the API key whose value is ``key``. Deleting an absent key succeeds."""
        ...

    def delete_app_key(self, key: str) -> None:  # pragma: no cover - interface
        """Delete the application key whose value is ``key``. Deleting an absent key succeeds."""
        ...


__all__ = ["IKeyProvider"]
