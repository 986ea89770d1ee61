"""Storage and store protocol definitions for the persistence layer.

This module declares the contracts the engine depends on. The host platform
supplies an ``IStorage`` (a flat key/value view, as a secrets platform exposes
to its plugins); the config and role stores are thin typed adapters on top of
it. Concrete storage views live under ``persistence/memory`` and
``persistence/sqlite``.

Failure / Error Semantics:
- Storage views raise :class:`~datadog_secrets.base.errors.StorageError` for
  backend failures. Absent keys are not errors: ``get`` returns ``None`` and
  ``delete`` is idempotent.

Concurrency:
- Implementations must tolerate concurrent calls from request threads. Reads
  are snapshot reads; there is no multi-key transaction.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ...base.models import ProviderConfig, Role


@runtime_checkable
class IStorage(Protocol):
    """Flat key/value storage view with prefix listing."""

    def get(self, key: str) -> Optional[bytes]:
        """Return the raw value stored under ``key`` or ``None``."""
        ...

    def put(self, key: str, value: bytes) -> None:
        """Create or overwrite ``key``."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key`` if present (idempotent)."""
        ...

    def list(self, prefix: str = "") -> List[str]:
        """Return keys under ``prefix`` with the prefix stripped, lexically sorted.

        Keys nested deeper (containing ``/`` after the prefix) are reported by
        their first segment followed by ``/``.
        """
        ...


class IConfigStore(Protocol):
    """Singleton provider configuration store."""

    def read(self) -> Optional[ProviderConfig]:
        ...

    def write(self, config: ProviderConfig) -> None:
        ...

    def delete(self) -> None:
        ...


class IRoleStore(Protocol):
    """Role definitions keyed by name."""

    def read(self, name: str) -> Optional[Role]:
        ...

    def write(self, role: Role) -> None:
        """Persist ``role``. Callers validate before writing."""
        ...

    def delete(self, name: str) -> None:
        ...

    def list(self, prefix: str = "") -> List[str]:
        """Return role names starting with ``prefix``."""
        ...
