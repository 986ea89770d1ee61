"""SQLite-backed implementation of ``IStorage``.

Each operation is its own transaction: writes commit immediately so a stored
role or configuration is durable before the call returns. ``sqlite3.Error``
is translated into :class:`StorageError`.
"""

from __future__ import annotations

import sqlite3
import threading
from typing import List, Optional

from ...base.errors import StorageError
from ..list_helpers import collapse_listing


def _like_escape(prefix: str) -> str:
    return prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqliteStorage:
    """Storage view over the ``entries`` table.

    Parameters
    ----------
    conn:
        Connection prepared by :func:`create_connection` with the schema
        initialized by :func:`init_schema`.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        try:
            with self._lock:
                row = self.conn.execute("SELECT value FROM entries WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"storage read failed: {exc}", key=key) from exc
        return bytes(row[0]) if row else None

    def put(self, key: str, value: bytes) -> None:
        try:
            with self._lock:
                self.conn.execute(
                    "INSERT INTO entries(key, value, updated_at) VALUES(?, ?, CURRENT_TIMESTAMP) "
                    "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=CURRENT_TIMESTAMP",
                    (key, sqlite3.Binary(value)),
                )
                self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"storage write failed: {exc}", key=key) from exc

    def delete(self, key: str) -> None:
        try:
            with self._lock:
                self.conn.execute("DELETE FROM entries WHERE key = ?", (key,))
                self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"storage delete failed: {exc}", key=key) from exc

    def list(self, prefix: str = "") -> List[str]:
        try:
            with self._lock:
                rows = self.conn.execute(
                    "SELECT key FROM entries WHERE key LIKE ? ESCAPE '\\' ORDER BY key",
                    (_like_escape(prefix) + "%",),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"storage list failed: {exc}", key=prefix) from exc
        return collapse_listing((r[0] for r in rows), prefix)

    def close(self) -> None:
        with self._lock:
            self.conn.close()


__all__ = ["SqliteStorage"]
