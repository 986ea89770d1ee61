"""Revocation handler: lease internal data -> provider delete calls.

The recorded :class:`IssuedCredentialSet` is the only source of truth; the
role is never consulted. Deletions run API key first, then application key,
and stop at the first failure so the host can retry the whole revocation
with the same data (deleting an already deleted key succeeds).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ..base.errors import ProviderError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import IssuedCredentialSet
from .client_handle import ClientHandle
from .issuance import wrap_provider_error


class RevocationHandler:
    """Delete exactly the credentials recorded in a lease."""

    def __init__(self, clients: ClientHandle) -> None:
        self._clients = clients
        self.logger = get_logger("datadog_secrets.engine.revocation")

    def revoke(self, credentials: Union[IssuedCredentialSet, Mapping[str, Any]]) -> None:
        """Revoke ``credentials`` (a credential set or raw lease internal data).

        Raises:
            LeaseDataError: raw internal data is malformed.
            NotConfiguredError: no admin credentials stored.
            ProviderError: a deletion failed; later deletions were not attempted.
        """
        if not isinstance(credentials, IssuedCredentialSet):
            credentials = IssuedCredentialSet.from_internal_data(credentials)
        client = self._clients.get()
        key_type = credentials.key_type
        ctx = LogContext(operation="revoke", key_type=key_type.value)
        log_event(self.logger, "keys.revoke.start", ctx)

        if key_type.includes_api and credentials.api_key:
            try:
                client.delete_api_key(credentials.api_key)
            except ProviderError as exc:
                self._log_failure(ctx, "delete_api_key", exc)
                raise wrap_provider_error(exc, "error revoking API key") from exc

        if key_type.includes_app and credentials.app_key:
            try:
                client.delete_app_key(credentials.app_key)
            except ProviderError as exc:
                self._log_failure(ctx, "delete_app_key", exc)
                raise wrap_provider_error(exc, "error revoking Application key") from exc

        log_event(self.logger, "keys.revoke.success", ctx)

    def _log_failure(self, ctx: LogContext, step: str, exc: ProviderError) -> None:
        log_event(
            self.logger,
            "keys.revoke.error",
            ctx,
            level=logging.ERROR,
            step=step,
            error_code=exc.code.value,
            status=exc.status,
            retryable=exc.retryable,
        )


__all__ = ["RevocationHandler"]
