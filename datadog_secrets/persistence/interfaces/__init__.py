from .repos import IConfigStore, IRoleStore, IStorage

__all__ = ["IStorage", "IConfigStore", "IRoleStore"]
