"""SQLite engine helpers for the persistence layer.

Purpose
-------
Provide safe, centralized helpers for opening SQLite connections and ensuring
schema availability for local development and single-node deployments.

External dependencies
---------------------
- Standard library only (``sqlite3``). No side effects at import time.

Timeout and reliability strategy
--------------------------------
- Applies a standard ``busy_timeout`` (milliseconds) from
  ``datadog_secrets.config.defaults`` to mitigate lock contention.
- Enables WAL journaling and NORMAL synchronous mode for durability with good
  interactive performance.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from ...config.defaults import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_DEFAULT_DB_NAME,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)

DEFAULT_DB_DIR = Path.home() / ".datadog_secrets"
DEFAULT_DB_PATH = DEFAULT_DB_DIR / SQLITE_DEFAULT_DB_NAME


def get_db_path(db_path: Optional[str] = None) -> Path:
    """Return a concrete database file path.

    Parameters
    ----------
    db_path:
        Optional string path. When ``None``, defaults to ``DEFAULT_DB_PATH``.
        ``~`` is expanded.
    """
    return Path(db_path).expanduser() if db_path else DEFAULT_DB_PATH


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open a SQLite connection with sane defaults and apply PRAGMA settings.

    The connection is opened with ``check_same_thread=False`` because storage
    views are shared across request threads; callers serialize access.

    Returns
    -------
    sqlite3.Connection
        An open connection with ``row_factory`` set to ``sqlite3.Row``.
    """
    path = get_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute(f"PRAGMA journal_mode={SQLITE_JOURNAL_MODE};")
    conn.execute(f"PRAGMA synchronous={SQLITE_SYNCHRONOUS};")
    conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")  # ms
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the ``entries`` table if it does not exist, then commit.

    Schema overview
    ---------------
    - ``entries``: storage key -> opaque value blob (JSON written by the
      store adapters), with a modification timestamp.
    """
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS entries (
            key TEXT PRIMARY KEY,
            value BLOB NOT NULL,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        """
    )
    conn.commit()

