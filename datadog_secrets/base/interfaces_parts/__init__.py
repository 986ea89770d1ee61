from .key_provider import IKeyProvider

__all__ = ["IKeyProvider"]
