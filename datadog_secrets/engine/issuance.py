"""Issuance engine: role lookup -> provider calls -> lease.

The API key is always created before the application key. A failure of the
first provider call aborts issuance with nothing to clean up. Under the
``both`` key type a failure of the application-key call happens after the
API key already exists at Datadog; by default that key is left in place and
reported in an ``keys.issue.orphan`` warning. With
``cleanup_on_partial_failure`` enabled the engine deletes it (best effort)
before surfacing the original error.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Callable, Optional

from ..base.errors import MissingRoleNameError, ProviderError, RoleNotFoundError
from ..base.interfaces import IKeyProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import IssuedCredentialSet, IssueResult, Lease
from ..config.defaults import GENERATED_KEY_NAME_PREFIX
from ..persistence.interfaces import IRoleStore
from .client_handle import ClientHandle


def wrap_provider_error(exc: ProviderError, context: str) -> ProviderError:
    """Return a copy of ``exc`` whose message is prefixed with ``context``."""
    return dataclasses.replace(exc, message=f"{context}: {exc.message}")


def generate_key_name(role_name: str, now: float) -> str:
    """Informational key name: ``vault-<role>-<unix seconds>``."""
    return f"{GENERATED_KEY_NAME_PREFIX}-{role_name}-{int(now)}"


class IssuanceEngine:
    """Mint Datadog credentials for a role.

    Parameters
    ----------
    roles:
        Role store used for the snapshot read of the role.
    clients:
        Shared provider client handle.
    cleanup_on_partial_failure:
        Delete an already created API key when the application key call fails.
    clock:
        Time source for generated key names.
    """

    def __init__(
        self,
        roles: IRoleStore,
        clients: ClientHandle,
        *,
        cleanup_on_partial_failure: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._roles = roles
        self._clients = clients
        self._cleanup = cleanup_on_partial_failure
        self._clock = clock
        self.logger = get_logger("datadog_secrets.engine.issuance")

    def issue(self, role_name: str, key_name: Optional[str] = None) -> IssueResult:
        """Create the credentials described by ``role_name``.

        Raises:
            MissingRoleNameError: ``role_name`` is empty.
            RoleNotFoundError: no such role.
            NotConfiguredError: no admin credentials stored; no provider call is made.
            ProviderError: a provider call failed (message prefixed with the step).
            StorageError: role or configuration could not be read.
        """
        if not role_name:
            raise MissingRoleNameError()
        role = self._roles.read(role_name)
        if role is None:
            raise RoleNotFoundError(role_name)

        client = self._clients.get()
        name = key_name or generate_key_name(role_name, self._clock())
        ctx = LogContext(operation="issue", role=role_name, key_type=role.key_type.value, key_name=name)
        log_event(self.logger, "keys.issue.start", ctx)

        api_key: Optional[str] = None
        app_key: Optional[str] = None
        if role.key_type.includes_api:
            try:
                api_key = client.create_api_key(name)
            except ProviderError as exc:
                self._log_failure(ctx, "create_api_key", exc)
                raise wrap_provider_error(exc, "error creating API key") from exc

        if role.key_type.includes_app:
            try:
                app_key = client.create_app_key(name, list(role.scopes))
            except ProviderError as exc:
                self._log_failure(ctx, "create_app_key", exc)
                if api_key is not None:
                    self._handle_orphan(client, api_key, ctx)
                raise wrap_provider_error(exc, "error creating Application key") from exc

        credentials = IssuedCredentialSet(key_type=role.key_type, api_key=api_key, app_key=app_key)
        lease = Lease(credentials=credentials, ttl=role.ttl, max_ttl=role.max_ttl, renewable=True)
        log_event(self.logger, "keys.issue.success", ctx, ttl=role.ttl, max_ttl=role.max_ttl)
        return IssueResult(lease=lease, key_name=name)

    def _log_failure(self, ctx: LogContext, step: str, exc: ProviderError) -> None:
        log_event(
            self.logger,
            "keys.issue.error",
            ctx,
            level=logging.ERROR,
            step=step,
            error_code=exc.code.value,
            status=exc.status,
        )

    def _handle_orphan(self, client: IKeyProvider, api_key: str, ctx: LogContext) -> None:
        """Deal with an API key created by a ``both`` issuance that then failed."""
        if not self._cleanup:
            log_event(self.logger, "keys.issue.orphan", ctx, level=logging.WARNING, orphaned="api_key")
            return
        try:
            client.delete_api_key(api_key)
        except ProviderError as cleanup_exc:
            log_event(
                self.logger,
                "keys.issue.cleanup_failed",
                ctx,
                level=logging.WARNING,
                orphaned="api_key",
                error_code=cleanup_exc.code.value,
            )
            return
        log_event(self.logger, "keys.issue.cleanup", ctx, cleaned="api_key")


__all__ = ["IssuanceEngine", "generate_key_name", "wrap_provider_error"]
