"""Helpers shared by storage views."""

from __future__ import annotations

from typing import Iterable, List


def collapse_listing(keys: Iterable[str], prefix: str) -> List[str]:
    """Strip ``prefix`` and fold deeper paths into ``segment/`` entries.

    Mirrors the listing semantics of hierarchical secret stores: only the
    immediate children of ``prefix`` are returned, sorted and de-duplicated.
    """
    out = set()
    for key in keys:
        if not key.startswith(prefix):
            continue
        rest = key[len(prefix):]
        if not rest:
            continue
        head, sep, _ = rest.partition("/")
        out.add(head + sep)
    return sorted(out)
