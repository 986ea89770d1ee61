"""Role definition: what to mint and for how long."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .key_type import KeyType


@dataclass(frozen=True)
class Role:
    """Named issuance policy.

    Attributes:
        name: Unique role name; used as the storage key and never stored in
            the record body.
        key_type: Credentials minted per issuance.
        scopes: Application-key scopes, in order. Ignored for ``api_key`` roles.
        ttl: Default lease TTL in seconds.
        max_ttl: Maximum lease TTL in seconds.

    Invariants (enforced by the role validator before any write):
        ``ttl <= max_ttl``; ``key_type`` is a :class:`KeyType`.
    """

    name: str
    key_type: KeyType
    scopes: List[str] = field(default_factory=list)
    ttl: int = 0
    max_ttl: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted/readable body (without the name)."""
        return {
            "key_type": self.key_type.value,
            "scopes": list(self.scopes),
            "ttl": self.ttl,
            "max_ttl": self.max_ttl,
        }


__all__ = ["Role"]
