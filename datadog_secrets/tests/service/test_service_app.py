from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from datadog_secrets.base.errors import ErrorCode
from datadog_secrets.service.app import create_app


@pytest.fixture()
def client(backend) -> TestClient:
    return TestClient(create_app(backend))


@pytest.fixture()
def configured(client) -> TestClient:
    r = client.post("/config", json={"api_key": "admin-api-key-0001", "app_key": "admin-app-key-0002"})
    assert r.status_code == 200  # nosec B101
    return client


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200  # nosec B101
    assert r.json() == {"ok": True}  # nosec B101


def test_config_read_is_masked(configured):
    r = configured.get("/config")
    assert r.status_code == 200  # nosec B101
    cfg = r.json()["config"]
    assert cfg["api_key"].endswith("0001")  # nosec B101
    assert "admin-api-key" not in cfg["api_key"]  # nosec B101


def test_config_missing_and_delete(configured):
    assert configured.delete("/config").status_code == 200  # nosec B101
    r = configured.get("/config")
    assert r.status_code == 404  # nosec B101
    assert r.json()["ok"] is False  # nosec B101


def test_config_write_requires_both_keys(client):
    r = client.post("/config", json={"api_key": "only-one"})
    assert r.status_code == 400  # nosec B101
    assert r.json()["error"] == "invalid request"  # nosec B101


def test_role_crud(client):
    r = client.post("/roles/web", json={"key_type": "both", "scopes": "a,b", "ttl": "1h", "max_ttl": "2h"})
    assert r.status_code == 200  # nosec B101
    assert r.json()["role"] == {"key_type": "both", "scopes": ["a", "b"], "ttl": 3600, "max_ttl": 7200}  # nosec B101

    client.post("/roles/api", json={"key_type": "api_key"})
    assert client.get("/roles").json()["keys"] == ["api", "web"]  # nosec B101
    assert client.get("/roles", params={"prefix": "w"}).json()["keys"] == ["web"]  # nosec B101

    assert client.delete("/roles/web").status_code == 200  # nosec B101
    r = client.get("/roles/web")
    assert r.status_code == 404  # nosec B101
    assert r.json()["error"] == "role 'web' not found"  # nosec B101


@pytest.mark.parametrize(
    "body, fragment",
    [
        ({"key_type": "invalid"}, "invalid key_type"),
        ({"key_type": "both", "ttl": 7200, "max_ttl": 3600}, "cannot be greater than max_ttl"),
    ],
)
def test_role_validation_errors(client, body, fragment):
    r = client.post("/roles/bad", json=body)
    assert r.status_code == 400  # nosec B101
    assert fragment in r.json()["error"]  # nosec B101
    assert client.get("/roles").json()["keys"] == []  # nosec B101


def test_issue_not_configured(client, mock_client):
    client.post("/roles/web", json={"key_type": "both"})
    r = client.get("/keys/web")
    assert r.status_code == 400  # nosec B101
    assert r.json()["error"] == "datadog backend not configured"  # nosec B101
    assert mock_client.calls == []  # nosec B101


def test_issue_unknown_role(configured):
    r = configured.get("/keys/ghost")
    assert r.status_code == 404  # nosec B101
    assert r.json()["error"] == "role 'ghost' not found"  # nosec B101


def test_issue_revoke_cycle(configured, mock_client):
    mock_client.api_values.append("test-api-key")
    mock_client.app_values.append("test-app-key")
    configured.post("/roles/test-keys", json={"key_type": "both"})

    r = configured.get("/keys/test-keys")
    assert r.status_code == 200  # nosec B101
    body = r.json()
    assert body["data"] == {"api_key": "test-api-key", "app_key": "test-app-key"}  # nosec B101
    assert body["lease"]["ttl"] == 3600  # nosec B101
    assert body["lease"]["max_ttl"] == 86400  # nosec B101
    assert body["lease"]["renewable"] is True  # nosec B101

    r = configured.post("/leases/revoke", json={"internal_data": body["lease"]["internal_data"]})
    assert r.status_code == 200  # nosec B101
    assert mock_client.live_api_keys == {}  # nosec B101
    assert mock_client.live_app_keys == {}  # nosec B101


def test_issue_with_explicit_name(configured):
    configured.post("/roles/r", json={"key_type": "api_key"})
    assert configured.post("/keys/r", json={"name": "ci"}).json()["key_name"] == "ci"  # nosec B101
    assert configured.get("/keys/r", params={"name": "q"}).json()["key_name"] == "q"  # nosec B101
    assert configured.post("/keys/r").json()["key_name"] == "vault-r-1700000000"  # nosec B101


def test_provider_failure_maps_to_bad_gateway(configured, mock_client):
    configured.post("/roles/r", json={"key_type": "api_key"})
    mock_client.fail_next("create_api_key", code=ErrorCode.RATE_LIMIT, status=429)

    r = configured.get("/keys/r")

    assert r.status_code == 502  # nosec B101
    body = r.json()
    assert body["code"] == "rate_limit"  # nosec B101
    assert body["operation"] == "create_api_key"  # nosec B101
    assert body["retryable"] is False  # nosec B101
    assert body["error"].startswith("error creating API key")  # nosec B101


def test_revoke_malformed_lease_data(configured):
    r = configured.post("/leases/revoke", json={"internal_data": {"key_type": "nope"}})
    assert r.status_code == 400  # nosec B101


def test_renew_caps_ttl(configured, mock_client):
    internal = {"secret_type": "datadog_keys", "key_type": "api_key", "api_key": "k", "app_key": ""}
    r = configured.post(
        "/leases/renew",
        json={"internal_data": internal, "ttl": 3600, "max_ttl": 7200, "increment": "1d"},
    )
    assert r.status_code == 200  # nosec B101
    assert r.json()["lease"]["ttl"] == 7200  # nosec B101
    assert mock_client.calls == []  # nosec B101


def test_revoke_failure_maps_to_bad_gateway(configured, mock_client):
    mock_client.fail_next("delete_api_key")
    internal = {"secret_type": "datadog_keys", "key_type": "both", "api_key": "k1", "app_key": "k2"}

    r = configured.post("/leases/revoke", json={"internal_data": internal})

    assert r.status_code == 502  # nosec B101
    body = r.json()
    assert body["ok"] is False  # nosec B101
    assert body["operation"] == "delete_api_key"  # nosec B101
    assert body["status"] == 500  # nosec B101
    assert body["error"].startswith("error revoking API key")  # nosec B101
    assert mock_client.operations() == ["delete_api_key"]  # nosec B101


def test_config_write_rejects_non_ascii_keys(client):
    r = client.post("/config", json={"api_key": "ключ", "app_key": "admin-app-key"})
    assert r.status_code == 400  # nosec B101
    assert r.json()["error"] == "invalid request"  # nosec B101
    assert client.get("/config").status_code == 404  # nosec B101
