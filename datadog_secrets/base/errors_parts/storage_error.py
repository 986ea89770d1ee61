"""Persistence failure raised by storage views and store adapters."""
from __future__ import annotations

from typing import Optional

from .engine_error import EngineError


class StorageError(EngineError):
    """The underlying storage failed to read, write, delete or decode an entry.

    Attributes:
        key: Storage key involved in the failed operation, when known.
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message if key is None else f"{message} (key={key})")


__all__ = ["StorageError"]
