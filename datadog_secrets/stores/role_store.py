"""Role store adapter.

Roles are stored under ``role/<name>`` as JSON objects
``{"key_type", "scopes", "ttl", "max_ttl"}``. The store does not validate:
the facade runs the role validator before every :meth:`RoleStore.write`.
"""

from __future__ import annotations

from typing import List, Optional

from ..base.errors import InvalidKeyTypeError, StorageError
from ..base.models import KeyType, Role
from ..config.defaults import ROLE_STORAGE_PREFIX
from ..persistence.interfaces import IStorage
from .codec import decode_entry, encode_entry


class RoleStore:
    """Typed adapter over an :class:`IStorage` for :class:`Role` records."""

    def __init__(self, storage: IStorage, prefix: str = ROLE_STORAGE_PREFIX) -> None:
        self._storage = storage
        self._prefix = prefix

    def _key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    def read(self, name: str) -> Optional[Role]:
        key = self._key(name)
        raw = self._storage.get(key)
        if raw is None:
            return None
        return self._decode(name, key, raw)

    def write(self, role: Role) -> None:
        self._storage.put(self._key(role.name), encode_entry(role.to_dict()))

    def delete(self, name: str) -> None:
        self._storage.delete(self._key(name))

    def list(self, prefix: str = "") -> List[str]:
        return [n for n in self._storage.list(self._prefix) if n.startswith(prefix)]

    @staticmethod
    def _decode(name: str, key: str, raw: bytes) -> Role:
        data = decode_entry(key, raw)
        try:
            key_type = KeyType.parse(data.get("key_type"))
        except InvalidKeyTypeError as exc:
            raise StorageError(f"corrupt role entry: {exc}", key=key) from exc
        scopes = data.get("scopes") or []
        ttl, max_ttl = data.get("ttl", 0), data.get("max_ttl", 0)
        if not isinstance(scopes, list) or not all(isinstance(s, str) for s in scopes):
            raise StorageError("corrupt role entry: scopes must be a list of strings", key=key)
        if not isinstance(ttl, int) or not isinstance(max_ttl, int):
            raise StorageError("corrupt role entry: ttl/max_ttl must be integers", key=key)
        return Role(name=name, key_type=key_type, scopes=list(scopes), ttl=ttl, max_ttl=max_ttl)


__all__ = ["RoleStore"]
