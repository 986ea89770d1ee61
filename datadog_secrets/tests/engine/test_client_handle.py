from __future__ import annotations

import threading
from typing import List

import pytest

from datadog_secrets.base.errors import NotConfiguredError
from datadog_secrets.base.models import ProviderConfig
from datadog_secrets.engine import ClientHandle, DatadogSecretsBackend
from datadog_secrets.mock import MockDatadogClient
from datadog_secrets.persistence import InMemoryStorage


def test_client_is_built_lazily_and_cached():
    built: List[ProviderConfig] = []
    config = ProviderConfig("a", "b")

    def factory(cfg):
        built.append(cfg)
        return MockDatadogClient.from_config(cfg)

    handle = ClientHandle(factory, lambda: config)
    assert handle.cached is None  # nosec B101

    first = handle.get()
    second = handle.get()

    assert first is second  # nosec B101
    assert built == [config]  # nosec B101


def test_missing_config_raises_not_configured():
    handle = ClientHandle(MockDatadogClient.from_config, lambda: None)
    with pytest.raises(NotConfiguredError):
        handle.get()
    assert handle.cached is None  # nosec B101


def test_invalidate_rebuilds_on_next_get():
    configs = [ProviderConfig("a", "b"), ProviderConfig("c", "d")]
    built: List[ProviderConfig] = []

    def factory(cfg):
        built.append(cfg)
        return MockDatadogClient.from_config(cfg)

    handle = ClientHandle(factory, lambda: configs[len(built)])
    first = handle.get()
    handle.invalidate()
    assert handle.cached is None  # nosec B101

    second = handle.get()

    assert second is not first  # nosec B101
    assert second.config.api_key == "c"  # nosec B101
    assert built == configs  # nosec B101


def test_concurrent_first_use_builds_one_client():
    calls: List[int] = []
    start = threading.Barrier(8)

    def factory(cfg):
        calls.append(1)
        return MockDatadogClient.from_config(cfg)

    handle = ClientHandle(factory, lambda: ProviderConfig("a", "b"))
    seen = []

    def worker():
        start.wait()
        seen.append(handle.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1  # nosec B101
    assert all(c is seen[0] for c in seen)  # nosec B101


def test_config_write_swaps_client_for_next_issuance():
    factory_configs: List[ProviderConfig] = []

    def factory(cfg):
        factory_configs.append(cfg)
        return MockDatadogClient.from_config(cfg)

    be = DatadogSecretsBackend(InMemoryStorage(), client_factory=factory)
    be.write_role("r", "api_key")
    be.write_config(ProviderConfig("old-api", "old-app"))
    old_client = be.clients.get()
    be.issue("r")

    be.write_config(ProviderConfig("new-api", "new-app"))
    be.issue("r")
    new_client = be.clients.get()

    assert new_client is not old_client  # nosec B101
    assert [c.api_key for c in factory_configs] == ["old-api", "new-api"]  # nosec B101
    assert new_client.config.api_key == "new-api"  # nosec B101


def test_config_delete_makes_backend_unconfigured():
    be = DatadogSecretsBackend(InMemoryStorage(), client_factory=MockDatadogClient.from_config)
    be.write_role("r", "api_key")
    be.write_config(ProviderConfig("a", "b"))
    be.issue("r")

    be.delete_config()

    assert be.read_config() is None  # nosec B101
    with pytest.raises(NotConfiguredError):
        be.issue("r")
