"""Deterministic in-process Datadog stand-in for offline testing.

Purpose
-------
Implement the ``IKeyProvider`` contract without network traffic so the engine,
the HTTP surface and the development server can be exercised end to end.
Every call is recorded in :attr:`MockDatadogClient.calls` in order, live keys
are tracked so tests can assert that revocation removed exactly what issuance
created, and failures can be injected per operation.

Selected by the container when ``DD_SECRETS_USE_MOCKS=1``.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..base.errors import ErrorCode, ProviderError
from ..base.models import ProviderConfig


@dataclass
class MockCall:
    """One recorded provider invocation."""

    operation: str
    args: Tuple


@dataclass
class MockDatadogClient:
    """Fake key provider.

    Attributes
    ----------
    api_values / app_values:
        Optional queues of values to return from the create calls; when empty
        values are generated as ``mock-api-<n>`` / ``mock-app-<n>``.
    failures:
        Map of operation name to the :class:`ProviderError` to raise next time
        that operation is called (consumed once).
    """

    config: Optional[ProviderConfig] = None
    api_values: List[str] = field(default_factory=list)
    app_values: List[str] = field(default_factory=list)
    failures: Dict[str, ProviderError] = field(default_factory=dict)
    calls: List[MockCall] = field(default_factory=list)
    live_api_keys: Dict[str, str] = field(default_factory=dict)
    live_app_keys: Dict[str, Tuple[str, List[str]]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "MockDatadogClient":
        return cls(config=config)

    def fail_next(self, operation: str, code: ErrorCode = ErrorCode.SERVER_ERROR, status: Optional[int] = 500) -> None:
        """Make the next call of ``operation`` raise a :class:`ProviderError`."""
        self.failures[operation] = ProviderError(
            code=code,
            message=f"injected failure for {operation}",
            operation=operation,
            status=status,
        )

    def operations(self) -> List[str]:
        return [c.operation for c in self.calls]

    def _record(self, operation: str, *args) -> None:
        with self._lock:
            self.calls.append(MockCall(operation, args))
            err = self.failures.pop(operation, None)
        if err is not None:
            raise err

    def create_api_key(self, name: str) -> str:
        self._record("create_api_key", name)
        with self._lock:
            value = self.api_values.pop(0) if self.api_values else f"mock-api-{next(self._counter)}"
            self.live_api_keys[value] = name
        return value

    def create_app_key(self, name: str, scopes: Sequence[str]) -> str:
        self._record("create_app_key", name, list(scopes))
        with self._lock:
            value = self.app_values.pop(0) if self.app_values else f"mock-app-{next(self._counter)}"
            self.live_app_keys[value] = (name, list(scopes))
        return value

    def delete_api_key(self, key: str) -> None:
        self._record("delete_api_key", key)
        with self._lock:
            self.live_api_keys.pop(key, None)

    def delete_app_key(self, key: str) -> None:
        self._record("delete_app_key", key)
        with self._lock:
            self.live_app_keys.pop(key, None)


__all__ = ["MockDatadogClient", "MockCall"]
