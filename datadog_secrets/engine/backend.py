"""Backend facade: the operations the host platform invokes.

``DatadogSecretsBackend`` owns the storage-backed stores, the shared
provider client handle and the issuance / revocation engines. It is the only
object the HTTP service (or any other host adapter) talks to.

Configuration writes and deletes invalidate the cached client so the next
issuance or revocation is authenticated with the new admin pair. Calls that
already hold the old client finish with it.
"""

from __future__ import annotations

import time
from functools import partial
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from ..base.errors import MissingRoleNameError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import IssuedCredentialSet, IssueResult, Lease, ProviderConfig, Role
from ..config.defaults import DATADOG_DEFAULT_BASE_URL
from ..datadog import DatadogClient
from ..persistence.interfaces import IStorage
from ..stores import ConfigStore, RoleStore
from .client_handle import ClientFactory, ClientHandle
from .issuance import IssuanceEngine
from .revocation import RevocationHandler
from .role_validator import validate_role


class DatadogSecretsBackend:
    """Dynamic Datadog credential backend.

    Parameters
    ----------
    storage:
        Host-provided key/value storage view.
    client_factory:
        Builds a provider client from a :class:`ProviderConfig`. Defaults to
        :meth:`DatadogClient.from_config` bound to ``base_url``.
    base_url:
        Datadog API base URL for the default factory.
    cleanup_on_partial_failure:
        Forwarded to :class:`IssuanceEngine`.
    clock:
        Time source for generated key names.
    """

    def __init__(
        self,
        storage: IStorage,
        *,
        client_factory: Optional[ClientFactory] = None,
        base_url: str = DATADOG_DEFAULT_BASE_URL,
        cleanup_on_partial_failure: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.storage = storage
        self.config_store = ConfigStore(storage)
        self.role_store = RoleStore(storage)
        factory = client_factory or partial(DatadogClient.from_config, base_url=base_url)
        self.clients = ClientHandle(factory, self.config_store.read)
        self.issuance = IssuanceEngine(
            self.role_store,
            self.clients,
            cleanup_on_partial_failure=cleanup_on_partial_failure,
            clock=clock,
        )
        self.revocation = RevocationHandler(self.clients)
        self.logger = get_logger("datadog_secrets.engine.backend")

    # ---- configuration -------------------------------------------------
    def read_config(self) -> Optional[ProviderConfig]:
        return self.config_store.read()

    def write_config(self, config: ProviderConfig) -> None:
        """Persist the admin pair and drop the cached client."""
        self.config_store.write(config)
        self.clients.invalidate()
        log_event(self.logger, "config.write", LogContext(operation="config.write"))

    def delete_config(self) -> None:
        self.config_store.delete()
        self.clients.invalidate()
        log_event(self.logger, "config.delete", LogContext(operation="config.delete"))

    # ---- roles ---------------------------------------------------------
    def read_role(self, name: str) -> Optional[Role]:
        if not name:
            raise MissingRoleNameError()
        return self.role_store.read(name)

    def write_role(
        self,
        name: str,
        key_type: Any,
        scopes: Union[str, Iterable[str], None] = None,
        ttl: Optional[int] = None,
        max_ttl: Optional[int] = None,
    ) -> Role:
        """Validate and persist a role, replacing any existing definition.

        Raises:
            RoleValidationError: the role is invalid; nothing is written.
            StorageError: the write failed.
        """
        role = validate_role(name, key_type, scopes=scopes, ttl=ttl, max_ttl=max_ttl)
        self.role_store.write(role)
        log_event(
            self.logger,
            "role.write",
            LogContext(operation="role.write", role=role.name, key_type=role.key_type.value),
            ttl=role.ttl,
            max_ttl=role.max_ttl,
        )
        return role

    def delete_role(self, name: str) -> None:
        """Delete a role. Outstanding leases stay revocable."""
        if not name:
            raise MissingRoleNameError()
        self.role_store.delete(name)
        log_event(self.logger, "role.delete", LogContext(operation="role.delete", role=name))

    def list_roles(self, prefix: str = "") -> List[str]:
        return self.role_store.list(prefix)

    # ---- credentials ---------------------------------------------------
    def issue(self, role_name: str, key_name: Optional[str] = None) -> IssueResult:
        return self.issuance.issue(role_name, key_name)

    def revoke(self, credentials: Union[IssuedCredentialSet, Mapping[str, Any]]) -> None:
        self.revocation.revoke(credentials)

    def renew(self, lease: Lease, increment: Optional[int] = None) -> Lease:
        """Extend a lease up to its ``max_ttl``. No provider call is made."""
        return lease.renewed(increment)


__all__ = ["DatadogSecretsBackend"]
