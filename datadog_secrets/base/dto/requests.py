"""Request DTOs for the HTTP surface.

Bodies are validated once at the edge with Pydantic v2 and then handed to the
backend as plain values. Semantic checks (key type, ``ttl <= max_ttl``) stay
in the role validator so every caller gets the same errors regardless of
transport.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .durations import parse_duration_seconds


class ConfigWriteDTO(BaseModel):
    """Admin credential pair for ``POST /config``."""

    api_key: str = Field(..., min_length=1)
    app_key: str = Field(..., min_length=1)

    @field_validator("api_key", "app_key")
    @classmethod
    def _ascii_only(cls, value: str) -> str:
        # Sent verbatim as HTTP header values.
        if not value.isascii():
            raise ValueError("must contain only ASCII characters")
        return value


class RoleWriteDTO(BaseModel):
    """Role definition for ``POST /roles/{name}``.

    Attributes:
        key_type: ``api_key``, ``app_key`` or ``both`` (checked by the validator).
        scopes: Application-key scopes as a list or a comma-separated string.
        ttl / max_ttl: Seconds or duration strings; ``None`` selects the defaults.
    """

    key_type: str
    scopes: Union[List[str], str, None] = None
    ttl: Optional[int] = None
    max_ttl: Optional[int] = None

    @field_validator("ttl", "max_ttl", mode="before")
    @classmethod
    def _parse_duration(cls, value: Any) -> Optional[int]:
        return parse_duration_seconds(value)


class IssueRequestDTO(BaseModel):
    """Optional body for ``POST /keys/{role}``."""

    name: Optional[str] = None


class RevokeRequestDTO(BaseModel):
    """Lease internal data handed back for revocation."""

    internal_data: Dict[str, Any]


class RenewRequestDTO(BaseModel):
    """Lease to renew plus the requested increment.

    ``ttl`` and ``max_ttl`` describe the lease as issued; ``increment`` is the
    TTL the host asks for (defaults to the current ``ttl``).
    """

    internal_data: Dict[str, Any]
    ttl: int = Field(..., ge=0)
    max_ttl: int = Field(..., ge=0)
    increment: Optional[int] = None

    @field_validator("increment", mode="before")
    @classmethod
    def _parse_increment(cls, value: Any) -> Optional[int]:
        return parse_duration_seconds(value)


__all__ = [
    "ConfigWriteDTO",
    "RoleWriteDTO",
    "IssueRequestDTO",
    "RevokeRequestDTO",
    "RenewRequestDTO",
]
