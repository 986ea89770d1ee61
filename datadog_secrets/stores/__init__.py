"""Typed store adapters over the host storage view."""

from .config_store import ConfigStore
from .role_store import RoleStore

__all__ = ["ConfigStore", "RoleStore"]
