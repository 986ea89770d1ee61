"""Datadog key-management client.

Summary
-------
Implements :class:`~datadog_secrets.base.interfaces.IKeyProvider` against the
Datadog v1 REST API:

- ``POST /api_key`` ``{"name"}`` -> ``{"api_key": ...}``
- ``POST /application_key`` ``{"name", "scopes"}`` -> ``{"application_key": ...}``
- ``DELETE /api_key/{value}``
- ``DELETE /application_key/{value}``

Every request carries the admin pair captured at construction in the
``DD-API-KEY`` / ``DD-APPLICATION-KEY`` headers. The pair never changes for
the lifetime of a client; when configuration changes the engine builds a new
client.

External dependencies
---------------------
- ``httpx`` through the shared pool in :mod:`datadog_secrets.base.http`.

Timeout and retry semantics
---------------------------
- Requests use the pooled client's timeout (``get_timeout_config()``).
- No retries. Any transport failure or status >= 400 raises
  :class:`ProviderError` naming the failed operation; retry policy belongs to
  the host.
- A ``404`` on DELETE means the key is already gone and is treated as
  success, which makes revocation safe to retry.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional, Sequence
from urllib.parse import quote

import httpx

from ..base.errors import RETRYABLE_CODES, ErrorCode, ProviderError, classify_exception, code_for_status
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderConfig
from ..config.defaults import (
    DATADOG_API_KEY_HEADER,
    DATADOG_APP_KEY_HEADER,
    DATADOG_DEFAULT_BASE_URL,
)

_POOL_PURPOSE = "datadog.keys"


class DatadogClient:
    """HTTP client for minting and deleting Datadog API/application keys.

    Parameters
    ----------
    api_key, app_key:
        Admin credential pair used to authenticate every request.
    base_url:
        Datadog API base URL including the version segment.
    http_client:
        Optional ``httpx.Client`` to use instead of the shared pool (tests
        inject one backed by ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        app_key: str,
        *,
        base_url: str = DATADOG_DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            DATADOG_API_KEY_HEADER: api_key,
            DATADOG_APP_KEY_HEADER: app_key,
        }
        self._http = http_client
        self.logger = get_logger("datadog_secrets.datadog")

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        *,
        base_url: str = DATADOG_DEFAULT_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ) -> "DatadogClient":
        return cls(config.api_key, config.app_key, base_url=base_url, http_client=http_client)

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # IKeyProvider
    # ------------------------------------------------------------------
    def create_api_key(self, name: str) -> str:
        resp = self._request("create_api_key", "POST", "/api_key", {"name": name})
        return self._extract_value("create_api_key", resp, "api_key")

    def create_app_key(self, name: str, scopes: Sequence[str]) -> str:
        payload = {"name": name, "scopes": list(scopes)}
        resp = self._request("create_app_key", "POST", "/application_key", payload)
        return self._extract_value("create_app_key", resp, "application_key")

    def delete_api_key(self, key: str) -> None:
        self._delete("delete_api_key", f"/api_key/{quote(key, safe='')}")

    def delete_app_key(self, key: str) -> None:
        self._delete("delete_app_key", f"/application_key/{quote(key, safe='')}")

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _client(self) -> httpx.Client:
        return self._http if self._http is not None else get_httpx_client(None, _POOL_PURPOSE)

    def _delete(self, operation: str, path: str) -> None:
        try:
            self._request(operation, "DELETE", path, None)
        except ProviderError as exc:
            if exc.status != 404:
                raise
            log_event(self.logger, "provider.delete.absent", LogContext(operation=operation))

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        payload: Optional[Mapping[str, Any]],
    ) -> httpx.Response:
        """Send one request and return the response, raising on failure."""
        url = f"{self._base_url}{path}"
        started = time.monotonic()
        try:
            resp = self._client().request(method, url, json=payload, headers=self._headers)
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Request could not be built from the stored base URL or admin keys.
            log_event(
                self.logger,
                "provider.request",
                LogContext(operation=operation),
                error_code=ErrorCode.VALIDATION.value,
            )
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"invalid request: {type(exc).__name__}: {exc}",
                operation=operation,
                retryable=False,
                raw=exc,
            ) from exc
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            log_event(
                self.logger,
                "provider.request",
                LogContext(operation=operation),
                error_code=code.value,
                elapsed_ms=int((time.monotonic() - started) * 1000),
            )
            raise ProviderError(
                code=code,
                message=f"request failed: {type(exc).__name__}: {exc}",
                operation=operation,
                retryable=code in RETRYABLE_CODES,
                raw=exc,
            ) from exc

        log_event(
            self.logger,
            "provider.request",
            LogContext(operation=operation),
            status=resp.status_code,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )
        if resp.status_code >= 400:
            code = code_for_status(resp.status_code)
            raise ProviderError(
                code=code,
                message=f"datadog API request failed with status {resp.status_code}{self._error_detail(resp)}",
                operation=operation,
                status=resp.status_code,
                retryable=code in RETRYABLE_CODES,
            )
        return resp

    @staticmethod
    def _error_detail(resp: httpx.Response) -> str:
        """Return Datadog's ``errors`` list as a suffix when present."""
        try:
            body = resp.json()
        except ValueError:
            return ""
        errors = body.get("errors") if isinstance(body, dict) else None
        if isinstance(errors, list) and errors:
            return ": " + "; ".join(str(e) for e in errors)
        return ""

    @staticmethod
    def _extract_value(operation: str, resp: httpx.Response, field: str) -> str:
        """Pull the created key value out of a creation response.

        Accepts both the flat shape ``{field: "<value>"}`` and the nested
        shape ``{field: {"key"|"hash": "<value>"}}``.
        """
        try:
            body: Dict[str, Any] = resp.json()
        except ValueError as exc:
            raise ProviderError(
                code=ErrorCode.INTERNAL,
                message="response body is not valid JSON",
                operation=operation,
                status=resp.status_code,
                raw=exc,
            ) from exc
        value = body.get(field) if isinstance(body, dict) else None
        if isinstance(value, dict):
            value = value.get("key") or value.get("hash")
        if not isinstance(value, str) or not value:
            raise ProviderError(
                code=ErrorCode.INTERNAL,
                message=f"response is missing the '{field}' value",
                operation=operation,
                status=resp.status_code,
            )
        return value


__all__ = ["DatadogClient"]
