"""Secrets engine core: validation, issuance, revocation and the facade."""

from .backend import DatadogSecretsBackend
from .client_handle import ClientHandle
from .issuance import IssuanceEngine, generate_key_name
from .revocation import RevocationHandler
from .role_validator import normalize_scopes, validate_role

__all__ = [
    "DatadogSecretsBackend",
    "ClientHandle",
    "IssuanceEngine",
    "RevocationHandler",
    "generate_key_name",
    "normalize_scopes",
    "validate_role",
]
