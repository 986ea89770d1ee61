"""Unified engine error taxonomy public surface.

This module re-exports the implementations under
``datadog_secrets.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.classification import classify_exception, code_for_status
from .errors_parts.engine_error import EngineError
from .errors_parts.error_code import RETRYABLE_CODES, ErrorCode
from .errors_parts.lookup_errors import NotConfiguredError, NotFoundError, RoleNotFoundError
from .errors_parts.provider_error import ProviderError
from .errors_parts.storage_error import StorageError
from .errors_parts.validation_errors import (
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
