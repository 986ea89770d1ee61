from __future__ import annotations

import pytest

from datadog_secrets.base.errors import LeaseDataError, NotConfiguredError, ProviderError
from datadog_secrets.base.models import IssuedCredentialSet, KeyType

BOTH_LEASE = {
    "secret_type": "datadog_keys",
    "key_type": "both",
    "api_key": "test-api-key",
    "app_key": "test-app-key",
}


def test_revoke_deletes_recorded_keys_in_order(configured_backend, mock_client):
    configured_backend.revoke(BOTH_LEASE)

    assert mock_client.operations() == ["delete_api_key", "delete_app_key"]  # nosec B101
    assert mock_client.calls[0].args == ("test-api-key",)  # nosec B101
    assert mock_client.calls[1].args == ("test-app-key",)  # nosec B101


def test_revoke_ignores_current_role_definition(configured_backend, mock_client):
    configured_backend.write_role("r", "both")
    issued = configured_backend.issue("r")
    configured_backend.write_role("r", "api_key")
    configured_backend.delete_role("r")

    configured_backend.revoke(issued.lease.to_dict()["internal_data"])

    assert mock_client.operations()[-2:] == ["delete_api_key", "delete_app_key"]  # nosec B101
    assert mock_client.live_api_keys == {}  # nosec B101
    assert mock_client.live_app_keys == {}  # nosec B101


def test_revoke_accepts_credential_set(configured_backend, mock_client):
    configured_backend.revoke(IssuedCredentialSet(key_type=KeyType.APP, app_key="only-app"))
    assert mock_client.operations() == ["delete_app_key"]  # nosec B101


def test_revoke_skips_empty_values(configured_backend, mock_client):
    configured_backend.revoke({**BOTH_LEASE, "app_key": ""})
    assert mock_client.operations() == ["delete_api_key"]  # nosec B101


def test_revoke_is_fail_fast(configured_backend, mock_client):
    mock_client.fail_next("delete_api_key")

    with pytest.raises(ProviderError) as excinfo:
        configured_backend.revoke(BOTH_LEASE)

    assert excinfo.value.message.startswith("error revoking API key: ")  # nosec B101
    assert mock_client.operations() == ["delete_api_key"]  # nosec B101


def test_revoke_app_key_failure_is_surfaced(configured_backend, mock_client):
    mock_client.fail_next("delete_app_key")
    with pytest.raises(ProviderError, match="error revoking Application key"):
        configured_backend.revoke(BOTH_LEASE)
    assert mock_client.operations() == ["delete_api_key", "delete_app_key"]  # nosec B101


def test_revoke_can_be_retried_after_failure(configured_backend, mock_client):
    mock_client.fail_next("delete_app_key")
    with pytest.raises(ProviderError):
        configured_backend.revoke(BOTH_LEASE)

    configured_backend.revoke(BOTH_LEASE)

    assert mock_client.operations() == [  # nosec B101
        "delete_api_key",
        "delete_app_key",
        "delete_api_key",
        "delete_app_key",
    ]


def test_revoke_without_config(backend, mock_client):
    with pytest.raises(NotConfiguredError):
        backend.revoke(BOTH_LEASE)
    assert mock_client.calls == []  # nosec B101


@pytest.mark.parametrize(
    "data",
    [
        {**BOTH_LEASE, "key_type": "bogus"},
        {**BOTH_LEASE, "secret_type": "aws"},
        {**BOTH_LEASE, "api_key": 42},
        ["not", "a", "mapping"],
    ],
)
def test_revoke_rejects_malformed_lease_data(backend, mock_client, data):
    # parsed before the client is resolved, so config absence does not mask it
    with pytest.raises(LeaseDataError):
        backend.revoke(data)
    assert mock_client.calls == []  # nosec B101
