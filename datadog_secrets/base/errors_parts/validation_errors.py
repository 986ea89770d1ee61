"""Local validation failures.

These errors are raised before any storage write or provider call and are
never retryable: the caller must fix the request.
"""
from __future__ import annotations

from .engine_error import EngineError


class RoleValidationError(EngineError, ValueError):
    """A role definition or request field violates an invariant."""


class MissingRoleNameError(RoleValidationError):
    """The role name is empty."""

    def __init__(self) -> None:
        super().__init__("missing role name")


class InvalidRoleNameError(RoleValidationError):
    """The role name has characters outside word characters, dots and dashes."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"invalid role name {name!r}; use letters, digits, underscores, dots or dashes, "
            "starting and ending with a letter, digit or underscore"
        )


class InvalidKeyTypeError(RoleValidationError):
    """The key type is not one of ``api_key``, ``app_key`` or ``both``."""

    def __init__(self, key_type: object) -> None:
        self.key_type = key_type
        super().__init__(
            f"invalid key_type {key_type!r}; must be 'api_key', 'app_key', or 'both'"
        )


class TTLExceedsMaxTTLError(RoleValidationError):
    """The role's default TTL is greater than its maximum TTL."""

    def __init__(self, ttl: int, max_ttl: int) -> None:
        self.ttl = ttl
        self.max_ttl = max_ttl
        super().__init__(f"ttl ({ttl}s) cannot be greater than max_ttl ({max_ttl}s)")


class LeaseDataError(RoleValidationError):
    """Lease internal data handed back for revocation is malformed."""


__all__ = [
    "RoleValidationError",
    "MissingRoleNameError",
    "InvalidRoleNameError",
    "InvalidKeyTypeError",
    "TTLExceedsMaxTTLError",
    "LeaseDataError",
]
