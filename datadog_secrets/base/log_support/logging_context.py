"""Structured logging context object for engine events.

This module defines :class:`LogContext`, a dataclass carrying the common
fields of issuance/revocation log events (operation, role, key type,
generated key name and extra metadata). Credential values never belong in a
context. ``to_dict`` merges the ``extra`` mapping and prunes ``None`` values
for clean structured output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for engine logging events."""

    operation: Optional[str] = None
    role: Optional[str] = None
    key_type: Optional[str] = None
    key_name: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
