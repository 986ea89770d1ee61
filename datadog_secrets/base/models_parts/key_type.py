"""Key type enumeration for roles and issued credential sets."""
from __future__ import annotations

from enum import Enum

from ..errors_parts.validation_errors import InvalidKeyTypeError

_ALIASES = {
    "api": "api_key",
    "app": "app_key",
    "application_key": "app_key",
}


class KeyType(str, Enum):
    """Which Datadog credentials a role mints.

    Values are the wire strings stored in role records and lease data.
    """

    API = "api_key"
    APP = "app_key"
    BOTH = "both"

    @property
    def includes_api(self) -> bool:
        return self in (KeyType.API, KeyType.BOTH)

    @property
    def includes_app(self) -> bool:
        return self in (KeyType.APP, KeyType.BOTH)

    @classmethod
    def parse(cls, value: object) -> "KeyType":
        """Return the member for ``value`` (case-insensitive, aliases allowed).

        Raises:
            InvalidKeyTypeError: if ``value`` names no key type.
        """
        if isinstance(value, KeyType):
            return value
        if not isinstance(value, str):
            raise InvalidKeyTypeError(value)
        raw = value.strip().lower()
        raw = _ALIASES.get(raw, raw)
        try:
            return cls(raw)
        except ValueError as exc:
            raise InvalidKeyTypeError(value) from exc


__all__ = ["KeyType"]
