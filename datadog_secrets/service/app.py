"""FastAPI surface for the Datadog secrets engine.

Routes mirror the host platform's mount layout:

- ``GET/POST/DELETE /config``
- ``GET /roles`` and ``GET/POST/DELETE /roles/{name}``
- ``GET|POST /keys/{role}`` (issue)
- ``POST /leases/revoke`` and ``POST /leases/renew``
- ``GET /health``

Engine errors are mapped to status codes by exception handlers so route
bodies stay thin: validation 400, missing records 404, not configured 400,
provider failures 502, storage failures 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..base.dto import ConfigWriteDTO, IssueRequestDTO, RenewRequestDTO, RevokeRequestDTO, RoleWriteDTO
from ..base.errors import (
    NotConfiguredError,
    NotFoundError,
    ProviderError,
    RoleNotFoundError,
    RoleValidationError,
    StorageError,
)
from ..base.logging import get_logger
from ..base.models import IssuedCredentialSet, Lease, ProviderConfig
from ..di import build_container
from ..engine import DatadogSecretsBackend

logger = get_logger("datadog_secrets.service")

_APP: Optional[FastAPI] = None


def _mask(value: str) -> str:
    """Return a masked form that reveals at most the last four characters."""
    if len(value) <= 8:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message, **extra})


def jsonable_errors(exc: RequestValidationError) -> list:
    """Reduce pydantic error entries to location and message."""
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]


def get_backend(request: Request) -> DatadogSecretsBackend:
    """FastAPI dependency returning the backend bound to the application."""
    return request.app.state.backend


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _request_invalid(_: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, "invalid request", details=jsonable_errors(exc))

    @app.exception_handler(RoleValidationError)
    async def _invalid(_: Request, exc: RoleValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(NotConfiguredError)
    async def _not_configured(_: Request, exc: NotConfiguredError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return _error(404, str(exc))

    @app.exception_handler(ProviderError)
    async def _provider(_: Request, exc: ProviderError) -> JSONResponse:
        logger.warning("provider failure: %s", exc)
        return _error(
            502,
            exc.message,
            code=exc.code.value,
            operation=exc.operation,
            status=exc.status,
            retryable=exc.retryable,
        )

    @app.exception_handler(StorageError)
    async def _storage(_: Request, exc: StorageError) -> JSONResponse:
        logger.error("storage failure: %s", exc)
        return _error(500, str(exc))


def create_app(backend: Optional[DatadogSecretsBackend] = None) -> FastAPI:
    """Build the FastAPI application around ``backend``.

    When ``backend`` is omitted one is built from the environment through
    :func:`~datadog_secrets.di.build_container`.
    """
    if backend is None:
        backend = build_container().backend()

    app = FastAPI(title="Datadog Secrets Engine", version="0.1.0")
    app.state.backend = backend
    _install_error_handlers(app)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True}

    # -----------------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------------

    @app.get("/config")
    def read_config(be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        """Return the stored admin pair, masked."""
        config = be.read_config()
        if config is None:
            raise NotFoundError("datadog backend not configured")
        return {"ok": True, "config": {"api_key": _mask(config.api_key), "app_key": _mask(config.app_key)}}

    @app.post("/config")
    def write_config(body: ConfigWriteDTO, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        be.write_config(ProviderConfig(api_key=body.api_key, app_key=body.app_key))
        return {"ok": True}

    @app.delete("/config")
    def delete_config(be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        be.delete_config()
        return {"ok": True}

    # -----------------------------------------------------------------------
    # Roles
    # -----------------------------------------------------------------------

    @app.get("/roles")
    def list_roles(prefix: str = "", be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        return {"ok": True, "keys": be.list_roles(prefix)}

    @app.get("/roles/{name}")
    def read_role(name: str, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        role = be.read_role(name)
        if role is None:
            raise RoleNotFoundError(name)
        return {"ok": True, "role": role.to_dict()}

    @app.post("/roles/{name}")
    def write_role(name: str, body: RoleWriteDTO, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        role = be.write_role(name, body.key_type, scopes=body.scopes, ttl=body.ttl, max_ttl=body.max_ttl)
        return {"ok": True, "role": role.to_dict()}

    @app.delete("/roles/{name}")
    def delete_role(name: str, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        be.delete_role(name)
        return {"ok": True}

    # -----------------------------------------------------------------------
    # Credentials
    # -----------------------------------------------------------------------

    def _issue(be: DatadogSecretsBackend, role: str, key_name: Optional[str]) -> Dict[str, Any]:
        result = be.issue(role, key_name)
        lease = result.lease
        return {
            "ok": True,
            "data": result.data,
            "lease": lease.to_dict(),
            "key_name": result.key_name,
        }

    @app.get("/keys/{role}")
    def issue_keys(role: str, name: Optional[str] = None, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        return _issue(be, role, name)

    @app.post("/keys/{role}")
    def issue_keys_post(
        role: str,
        body: Optional[IssueRequestDTO] = None,
        be: DatadogSecretsBackend = Depends(get_backend),
    ) -> Dict[str, Any]:
        return _issue(be, role, body.name if body else None)

    @app.post("/leases/revoke")
    def revoke_lease(body: RevokeRequestDTO, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        be.revoke(body.internal_data)
        return {"ok": True}

    @app.post("/leases/renew")
    def renew_lease(body: RenewRequestDTO, be: DatadogSecretsBackend = Depends(get_backend)) -> Dict[str, Any]:
        credentials = IssuedCredentialSet.from_internal_data(body.internal_data)
        lease = Lease(credentials=credentials, ttl=body.ttl, max_ttl=body.max_ttl)
        renewed = be.renew(lease, body.increment)
        return {"ok": True, "lease": renewed.to_dict()}

    return app


def get_app() -> FastAPI:
    """Return the process-wide application, building it on first use.

    Provides access to the configured FastAPI app for use in deployment.
    """
    global _APP  # noqa: PLW0603 - documented module cache
    if _APP is None:
        _APP = create_app()
    return _APP


__all__ = ["create_app", "get_app", "get_backend"]
