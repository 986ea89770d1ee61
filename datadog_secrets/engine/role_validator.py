"""Role-definition validation.

Runs before every role write. Validation is pure: it either returns a fully
formed :class:`Role` or raises, and never touches storage. Checks run in a
fixed order so callers get a stable error for multiply-invalid input:

1. name non-empty (:class:`MissingRoleNameError`)
2. name is word characters, dots and dashes, with a word character at each
   end (:class:`InvalidRoleNameError`)
3. key type valid (:class:`InvalidKeyTypeError`)
4. ttl / max_ttl are non-negative integers (:class:`RoleValidationError`)
5. ``ttl <= max_ttl`` (:class:`TTLExceedsMaxTTLError`)
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union

from ..base.errors import (
    InvalidRoleNameError,
    MissingRoleNameError,
    RoleValidationError,
    TTLExceedsMaxTTLError,
)
from ..base.models import KeyType, Role
from ..config.defaults import DEFAULT_ROLE_MAX_TTL_SECONDS, DEFAULT_ROLE_TTL_SECONDS

_ROLE_NAME_RE = re.compile(r"\w(?:[\w.-]*\w)?")


def normalize_scopes(scopes: Union[str, Iterable[str], None]) -> List[str]:
    """Return scopes as an ordered list, splitting comma-separated strings.

    Blank entries are dropped; order and duplicates are otherwise preserved.
    """
    if scopes is None:
        return []
    items = scopes.split(",") if isinstance(scopes, str) else list(scopes)
    out: List[str] = []
    for item in items:
        if not isinstance(item, str):
            raise RoleValidationError(f"scopes must be strings, got {type(item).__name__}")
        item = item.strip()
        if item:
            out.append(item)
    return out


def _seconds(field: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RoleValidationError(f"{field} must be an integer number of seconds")
    if value < 0:
        raise RoleValidationError(f"{field} cannot be negative")
    return value


def validate_role(
    name: str,
    key_type: object,
    scopes: Union[str, Iterable[str], None] = None,
    ttl: Optional[int] = None,
    max_ttl: Optional[int] = None,
) -> Role:
    """Validate raw role fields and build a :class:`Role`.

    ``ttl`` and ``max_ttl`` default to 3600s and 86400s when ``None``.
    """
    if not name:
        raise MissingRoleNameError()
    if not _ROLE_NAME_RE.fullmatch(name):
        raise InvalidRoleNameError(name)
    parsed_type = KeyType.parse(key_type)
    ttl_s = _seconds("ttl", DEFAULT_ROLE_TTL_SECONDS if ttl is None else ttl)
    max_ttl_s = _seconds("max_ttl", DEFAULT_ROLE_MAX_TTL_SECONDS if max_ttl is None else max_ttl)
    if ttl_s > max_ttl_s:
        raise TTLExceedsMaxTTLError(ttl_s, max_ttl_s)
    return Role(
        name=name,
        key_type=parsed_type,
        scopes=normalize_scopes(scopes),
        ttl=ttl_s,
        max_ttl=max_ttl_s,
    )


__all__ = ["validate_role", "normalize_scopes"]
