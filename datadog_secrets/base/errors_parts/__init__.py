"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `datadog_secrets.base.errors` for the stable surface.
"""

from .classification import classify_exception, code_for_status
from .engine_error import EngineError
from .error_code import RETRYABLE_CODES, ErrorCode
from .lookup_errors import NotConfiguredError, NotFoundError, RoleNotFoundError
from .provider_error import ProviderError
from .storage_error import StorageError
from .validation_errors import (
    InvalidKeyTypeError,
    InvalidRoleNameError,
    LeaseDataError,
    MissingRoleNameError,
    RoleValidationError,
    TTLExceedsMaxTTLError,
)

__all__ = [
    "EngineError",
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "classify_exception",
    "code_for_status",
    "RoleValidationError",
    "MissingRoleNameError",
    "InvalidRoleNameError",
    "InvalidKeyTypeError",
    "TTLExceedsMaxTTLError",
    "LeaseDataError",
    "NotFoundError",
    "RoleNotFoundError",
    "NotConfiguredError",
    "StorageError",
]
