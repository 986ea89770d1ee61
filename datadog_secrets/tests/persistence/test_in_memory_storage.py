from __future__ import annotations

from datadog_secrets.persistence import InMemoryStorage


def test_basic_operations():
    storage = InMemoryStorage()
    storage.put("config", b"x")
    assert storage.get("config") == b"x"  # nosec B101
    storage.delete("config")
    storage.delete("missing")
    assert storage.get("config") is None  # nosec B101
    assert len(storage) == 0  # nosec B101


def test_list_collapses_nested_keys():
    storage = InMemoryStorage()
    for key in ("role/b", "role/a", "role/team/x", "role/team/y", "config"):
        storage.put(key, b"{}")
    assert storage.list("role/") == ["a", "b", "team/"]  # nosec B101
    assert storage.list("") == ["config", "role/"]  # nosec B101
