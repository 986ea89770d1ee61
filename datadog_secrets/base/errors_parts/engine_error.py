"""Root of the engine's exception hierarchy.

Every error raised by the secrets engine derives from `EngineError`, so the
host (or the HTTP surface) can catch one type and map subclasses to
responses.
"""
from __future__ import annotations


class EngineError(Exception):
    """Base class for all secrets-engine errors."""


__all__ = ["EngineError"]
