"""Public re-exports for the SQLite storage adapter."""

from .engine import create_connection, get_db_path, init_schema
from .sqlite_storage import SqliteStorage

__all__ = ["SqliteStorage", "create_connection", "init_schema", "get_db_path"]
