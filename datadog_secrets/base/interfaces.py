"""Stable import path for base-layer protocols."""

from .interfaces_parts.key_provider import IKeyProvider

__all__ = ["IKeyProvider"]
