"""Shared fixtures for the secrets engine test suite.

Backends are wired to an in-memory storage view and a single
``MockDatadogClient`` so tests can assert on the exact provider calls an
operation made. Pooled HTTP clients are closed after every test.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from datadog_secrets.base.http import close_all_clients
from datadog_secrets.base.models import ProviderConfig
from datadog_secrets.engine import DatadogSecretsBackend
from datadog_secrets.mock import MockDatadogClient
from datadog_secrets.persistence import InMemoryStorage

FIXED_NOW = 1700000000.0


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep ambient ``DD_SECRETS_*`` variables from leaking into tests."""
    for name in (
        "DD_SECRETS_LOG_LEVEL",
        "DD_SECRETS_STORAGE",
        "DD_SECRETS_DB_PATH",
        "DD_SECRETS_USE_MOCKS",
        "DD_SECRETS_CLEANUP_PARTIAL",
        "DD_SECRETS_DATADOG_BASE_URL",
        "DD_SECRETS_HTTP_TIMEOUT_SECONDS",
        "DD_SECRETS_CONNECT_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    close_all_clients()


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def mock_client() -> MockDatadogClient:
    return MockDatadogClient()


@pytest.fixture()
def backend(storage: InMemoryStorage, mock_client: MockDatadogClient) -> DatadogSecretsBackend:
    """Unconfigured backend whose client factory always returns ``mock_client``."""
    return DatadogSecretsBackend(storage, client_factory=lambda _cfg: mock_client, clock=lambda: FIXED_NOW)


@pytest.fixture()
def configured_backend(backend: DatadogSecretsBackend) -> DatadogSecretsBackend:
    backend.write_config(ProviderConfig(api_key="admin-api-key", app_key="admin-app-key"))
    return backend


@pytest.fixture()
def strict_backend(storage: InMemoryStorage, mock_client: MockDatadogClient) -> DatadogSecretsBackend:
    """Configured backend that cleans up orphaned API keys."""
    be = DatadogSecretsBackend(
        storage,
        client_factory=lambda _cfg: mock_client,
        cleanup_on_partial_failure=True,
        clock=lambda: FIXED_NOW,
    )
    be.write_config(ProviderConfig(api_key="admin-api-key", app_key="admin-app-key"))
    return be
