"""HTTP service layer (FastAPI) for the secrets engine."""

from .app import create_app, get_app

__all__ = ["create_app", "get_app"]
