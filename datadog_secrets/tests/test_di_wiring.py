from __future__ import annotations

from datadog_secrets.base.models import ProviderConfig
from datadog_secrets.config import EngineSettings
from datadog_secrets.datadog import DatadogClient
from datadog_secrets.di import build_container
from datadog_secrets.mock import MockDatadogClient
from datadog_secrets.persistence import InMemoryStorage, SqliteStorage


def test_memory_container_with_mocks_issues_end_to_end():
    container = build_container(EngineSettings(storage="memory", use_mocks=True))
    backend = container.backend()

    assert isinstance(container.storage(), InMemoryStorage)  # nosec B101
    assert container.backend() is backend  # nosec B101

    backend.write_config(ProviderConfig("a", "b"))
    backend.write_role("r", "both")
    result = backend.issue("r")

    assert isinstance(backend.clients.cached, MockDatadogClient)  # nosec B101
    assert set(result.data) == {"api_key", "app_key"}  # nosec B101


def test_default_factory_builds_datadog_client_with_base_url():
    container = build_container(EngineSettings(storage="memory", base_url="https://api.datadoghq.eu/api/v1"))
    client = container.client_factory()(ProviderConfig("a", "b"))
    assert isinstance(client, DatadogClient)  # nosec B101
    assert client.base_url == "https://api.datadoghq.eu/api/v1"  # nosec B101


def test_sqlite_container_persists_roles(tmp_path):
    db = str(tmp_path / "engine.db")
    first = build_container(EngineSettings(storage="sqlite", db_path=db, use_mocks=True))
    assert isinstance(first.storage(), SqliteStorage)  # nosec B101
    first.backend().write_role("kept", "api_key")
    first.close()

    second = build_container(EngineSettings(storage="sqlite", db_path=db, use_mocks=True))
    try:
        assert second.backend().list_roles() == ["kept"]  # nosec B101
    finally:
        second.close()


def test_cleanup_setting_reaches_issuance():
    container = build_container(EngineSettings(storage="memory", use_mocks=True, cleanup_on_partial_failure=True))
    assert container.backend().issuance._cleanup is True  # nosec B101


def test_create_backend_uses_settings():
    from datadog_secrets import create_backend

    backend = create_backend(EngineSettings(storage="memory", use_mocks=True))
    assert isinstance(backend.storage, InMemoryStorage)  # nosec B101
