from .client import DatadogClient

__all__ = ["DatadogClient"]
