"""Lease value handed to the host, and the full issuance result."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .credentials import IssuedCredentialSet


@dataclass(frozen=True)
class Lease:
    """Time-bound wrapper around an issued credential set.

    The host platform owns the timers; the engine only states the TTL bounds.
    Renewal never mints new values, it only changes ``ttl``.
    """

    credentials: IssuedCredentialSet
    ttl: int
    max_ttl: int
    renewable: bool = True

    def renewed(self, increment: Optional[int] = None) -> "Lease":
        """Return a copy whose TTL is ``increment`` capped by ``max_ttl``.

        A missing or zero increment keeps the current TTL.
        """
        requested = increment or self.ttl
        return replace(self, ttl=max(0, min(requested, self.max_ttl)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ttl": self.ttl,
            "max_ttl": self.max_ttl,
            "renewable": self.renewable,
            "internal_data": self.credentials.to_internal_data(),
        }


@dataclass(frozen=True)
class IssueResult:
    """Return value of an issuance: caller payload plus the lease."""

    lease: Lease
    key_name: str

    @property
    def credentials(self) -> IssuedCredentialSet:
        return self.lease.credentials

    @property
    def data(self) -> Dict[str, str]:
        return self.lease.credentials.response_data()


__all__ = ["Lease", "IssueResult"]
