"""Base structured logging utilities for the secrets engine.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup across the engine, stores and provider client.

All engine loggers are children of the shared ``datadog_secrets`` logger,
whose level can be overridden with ``DD_SECRETS_LOG_LEVEL``. Events are
emitted through :func:`log_event` as single-line JSON payloads. Credential
values and admin keys must never be passed as fields.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "datadog_secrets"

_BASE_LOGGER_ATTR = "_dd_secrets_logger_initialized"
_FILE_HANDLER_ATTR = "_dd_secrets_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively, falling back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``datadog_secrets`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv("DD_SECRETS_LOG_LEVEL"), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
            for h in logger.handlers:
                h.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    logger.handlers[:] = [handler]
    # Propagate so host applications (and pytest's caplog) still see events.
    logger.propagate = True
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return the shared base logger or a child that propagates to it."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level (numeric or name). ``None`` keeps the current level.
    file_path: Optional[str]
        When provided, attach (or retarget) a rotating file handler writing to
        ``file_path``. When ``None``, any file handler previously attached by
        this function is removed.
    json_mode: bool
        JSON formatter (default) or plain text for the file handler.

    Returns
    -------
    logging.Logger
        The configured base logger.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            h.setFormatter(_formatter(json_mode))
            h.setLevel(logger.level)
            return logger
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()

    if abs_path is None:
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    # Rotate to avoid unbounded growth (10MB x 5 backups)
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as one JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from :func:`get_logger`).
    event: str
        Event name (e.g. ``keys.issue.start``).
    ctx: LogContext | None
        Operation context; merged shallowly.
    level: int
        Logging level for the record (default INFO).
    **fields: Any
        Additional JSON-serializable key/value pairs; ``None`` values are dropped.
    """
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
