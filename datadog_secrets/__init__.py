"""datadog_secrets package

Dynamic Datadog credential secrets engine.

Purpose:
    Mint short-lived Datadog API keys and/or application keys on demand
    according to named roles, hand them out as leases, and delete exactly
    those keys when the lease is revoked. Admin credentials and role
    definitions live in a host-provided key/value storage view.

Public API (re-exported):
    - Version: ``__version__``
    - Facade: :class:`DatadogSecretsBackend`, :func:`create_backend`
    - Models: :class:`ProviderConfig`, :class:`Role`, :class:`KeyType`,
      :class:`IssuedCredentialSet`, :class:`Lease`
    - Exceptions: :class:`EngineError`, :class:`ProviderError`, :class:`ErrorCode`
"""

from __future__ import annotations

from typing import Optional

from .base.errors import EngineError, ErrorCode, ProviderError
from .base.models import IssuedCredentialSet, KeyType, Lease, ProviderConfig, Role
from .config import EngineSettings
from .engine import DatadogSecretsBackend

__version__ = "0.1.0"


def create_backend(settings: Optional[EngineSettings] = None) -> DatadogSecretsBackend:
    """Build a backend wired from ``settings`` (or the ``DD_SECRETS_*`` environment)."""
    from .di import build_container

    return build_container(settings).backend()


__all__ = [
    "__version__",
    "DatadogSecretsBackend",
    "create_backend",
    "EngineSettings",
    "ProviderConfig",
    "Role",
    "KeyType",
    "IssuedCredentialSet",
    "Lease",
    "EngineError",
    "ProviderError",
    "ErrorCode",
]
