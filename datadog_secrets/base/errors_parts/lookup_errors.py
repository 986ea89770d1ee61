"""Missing-state errors: absent roles, absent provider configuration."""
from __future__ import annotations

from .engine_error import EngineError


class NotFoundError(EngineError, LookupError):
    """A requested record does not exist."""


class RoleNotFoundError(NotFoundError):
    """The named role does not exist. Caller-visible and not retryable."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"role '{role_name}' not found")


class NotConfiguredError(EngineError):
    """No Datadog admin credentials are configured.

    Raised for both issuance and revocation: the engine refuses to silently
    succeed without talking to the provider.
    """

    def __init__(self, message: str = "datadog backend not configured") -> None:
        super().__init__(message)


__all__ = ["NotFoundError", "RoleNotFoundError", "NotConfiguredError"]
