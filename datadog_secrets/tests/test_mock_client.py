from __future__ import annotations

import pytest

from datadog_secrets.base.errors import ErrorCode, ProviderError
from datadog_secrets.base.interfaces import IKeyProvider
from datadog_secrets.datadog import DatadogClient
from datadog_secrets.mock import MockDatadogClient


def test_clients_satisfy_key_provider_protocol():
    assert isinstance(MockDatadogClient(), IKeyProvider)  # nosec B101
    assert isinstance(DatadogClient("a", "b"), IKeyProvider)  # nosec B101


def test_mock_tracks_live_keys():
    mock = MockDatadogClient()
    api = mock.create_api_key("n")
    app = mock.create_app_key("n", ["s"])
    assert mock.live_api_keys == {api: "n"}  # nosec B101
    assert mock.live_app_keys == {app: ("n", ["s"])}  # nosec B101

    mock.delete_api_key(api)
    mock.delete_app_key(app)
    assert not mock.live_api_keys and not mock.live_app_keys  # nosec B101


def test_injected_failure_is_consumed_once():
    mock = MockDatadogClient()
    mock.fail_next("create_api_key", code=ErrorCode.TIMEOUT, status=None)
    with pytest.raises(ProviderError) as excinfo:
        mock.create_api_key("n")
    assert excinfo.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert mock.create_api_key("n").startswith("mock-api-")  # nosec B101
    assert mock.operations() == ["create_api_key", "create_api_key"]  # nosec B101
