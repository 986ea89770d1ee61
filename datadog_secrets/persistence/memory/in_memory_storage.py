"""In-memory implementation of ``IStorage``.

Suitable for tests, the mock development server and hosts that keep their
own durable copy. Thread-safe: every operation holds a single lock.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..list_helpers import collapse_listing


class InMemoryStorage:
    """Dictionary-backed storage view."""

    def __init__(self) -> None:
        self._data: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def list(self, prefix: str = "") -> List[str]:
        with self._lock:
            keys = list(self._data)
        return collapse_listing(keys, prefix)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


__all__ = ["InMemoryStorage"]
