"""Shared fixtures for persistence tests.

Provides a `conn` fixture that creates an isolated on-disk SQLite database
per-test using `create_connection` and `init_schema`, then closes it after
the test completes.
"""
from __future__ import annotations

import sqlite3
from contextlib import suppress
from pathlib import Path
from typing import Iterator

import pytest

from datadog_secrets.persistence.sqlite import create_connection, init_schema


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "engine.db")


@pytest.fixture()
def conn(db_path: str) -> Iterator[sqlite3.Connection]:
    """Yield an open connection to a temporary database with schema created."""
    connection = create_connection(db_path)
    init_schema(connection)
    try:
        yield connection
    finally:
        with suppress(sqlite3.Error):
            connection.close()
