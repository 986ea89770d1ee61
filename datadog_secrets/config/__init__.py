"""Configuration layer for the secrets engine.

Merge order is simple: built-in defaults (``defaults.py``) are overridden by
``DD_SECRETS_*`` environment variables (``env.py``), which callers may in turn
override by passing explicit :class:`EngineSettings` to the container.
"""

from .env import EngineSettings, load_settings

__all__ = ["EngineSettings", "load_settings"]
