"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `ProviderError`. Values
are lowercase snake_case and are considered a stable public contract for
logging and for the HTTP surface.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


# Codes for which a later retry by the host has a reasonable chance to succeed.
RETRYABLE_CODES = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.SERVER_ERROR,
        ErrorCode.UNAVAILABLE,
    }
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
