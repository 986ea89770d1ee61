from __future__ import annotations

import os

import uvicorn

from ..config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the secrets engine FastAPI app.

    Host, port and reload behavior come from environment variables:

    - DD_SECRETS_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - DD_SECRETS_SERVICE_PORT: port to bind (default 8092)
    - DD_SECRETS_SERVICE_RELOAD: "true"/"false" to toggle auto-reload
      (default False)

    Storage and provider selection follow ``DD_SECRETS_STORAGE`` and
    ``DD_SECRETS_USE_MOCKS``; see :mod:`datadog_secrets.config.env`.
    """
    host = os.getenv("DD_SECRETS_SERVICE_HOST", SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("DD_SECRETS_SERVICE_PORT"), SERVICE_DEFAULT_PORT)
    reload_enabled = os.getenv("DD_SECRETS_SERVICE_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "datadog_secrets.service.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
