"""Persistence layer: storage protocol plus in-memory and SQLite views."""

from .interfaces import IConfigStore, IRoleStore, IStorage
from .memory import InMemoryStorage
from .sqlite import SqliteStorage

__all__ = ["IStorage", "IConfigStore", "IRoleStore", "InMemoryStorage", "SqliteStorage"]
