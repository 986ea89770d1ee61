"""Duration parsing for TTL fields.

TTL inputs accept plain integer seconds, digit strings, or compact duration
strings such as ``"90s"``, ``"30m"``, ``"1h30m"`` or ``"2d"``. Parsing happens
at the request edge; the engine only ever sees integer seconds.
"""

from __future__ import annotations

import re
from typing import Any, Optional

_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
_DURATION_RE = re.compile(r"^(?:\d+[smhd])+$")
_PART_RE = re.compile(r"(\d+)([smhd])")


def parse_duration_seconds(value: Any) -> Optional[int]:
    """Return ``value`` as whole seconds (``None`` passes through).

    Raises:
        ValueError: when the value is not a non-negative duration.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("duration must be a number of seconds or a duration string")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("duration cannot be negative")
        return value
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    if isinstance(value, str):
        raw = value.strip().lower()
        if raw.isdigit():
            return int(raw)
        if _DURATION_RE.match(raw):
            return sum(int(n) * _UNIT_SECONDS[u] for n, u in _PART_RE.findall(raw))
    raise ValueError(f"invalid duration {value!r}")


__all__ = ["parse_duration_seconds"]
