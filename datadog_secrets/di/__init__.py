"""Composition root for the secrets engine."""
from __future__ import annotations

from .container import EngineContainer, build_container

__all__ = ["EngineContainer", "build_container"]
