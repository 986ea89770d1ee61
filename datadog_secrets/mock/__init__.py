from .client import MockCall, MockDatadogClient

__all__ = ["MockDatadogClient", "MockCall"]
