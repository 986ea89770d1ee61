"""JSON entry encoding shared by the store adapters."""

from __future__ import annotations

import json
from typing import Any, Dict

from ..base.errors import StorageError


def encode_entry(value: Dict[str, Any]) -> bytes:
    return json.dumps(value, separators=(",", ":"), sort_keys=True).encode("utf-8")


def decode_entry(key: str, raw: bytes) -> Dict[str, Any]:
    """Decode a stored JSON object, raising :class:`StorageError` on corruption."""
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise StorageError(f"corrupt entry: {exc}", key=key) from exc
    if not isinstance(data, dict):
        raise StorageError("corrupt entry: expected a JSON object", key=key)
    return data
