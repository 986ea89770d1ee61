"""
Structured provider error exception type.

Wraps non-2xx responses and transport failures from the Datadog API with a
normalized `ErrorCode`, the failed operation name and the HTTP status when
one was received.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .engine_error import EngineError
from .error_code import ErrorCode


@dataclass(eq=False)
class ProviderError(EngineError):
    """Represents a failed call to the credential provider.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging. Never
            contains credential values.
        operation: Provider operation that failed (e.g. ``"create_api_key"``).
        status: HTTP status code when a response was received.
        retryable: Hint for the host's retry policy (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    operation: str
    status: Optional[int] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = f" (status {self.status})" if self.status is not None else ""
        return f"datadog:{self.operation} {self.code.value}: {self.message}{status}"


__all__ = ["ProviderError"]
