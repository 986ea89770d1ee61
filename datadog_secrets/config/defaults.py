"""datadog_secrets.config.defaults
==============================

Central place for small, stable default values used across the
datadog_secrets package and the lightweight service layer. These defaults can
be overridden via environment variables (see :mod:`datadog_secrets.config.env`)
but provide sensible fallbacks for local development and tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Datadog API ----
# v1 key management endpoints; other Datadog sites (EU, US3, ...) override
# this through DD_SECRETS_DATADOG_BASE_URL.
DATADOG_DEFAULT_BASE_URL = "https://api.datadoghq.com/api/v1"
DATADOG_API_KEY_HEADER = "DD-API-KEY"
DATADOG_APP_KEY_HEADER = "DD-APPLICATION-KEY"

# Bounded request timeout for provider calls (seconds).
DATADOG_HTTP_TIMEOUT_SECONDS = 10.0


# ---- Roles & leases ----
DEFAULT_ROLE_TTL_SECONDS = 3600
DEFAULT_ROLE_MAX_TTL_SECONDS = 86400

# Generated key names look like "vault-<role>-<unix seconds>".
GENERATED_KEY_NAME_PREFIX = "vault"

# Tag written into lease internal data so the host can route revocations.
SECRET_TYPE = "datadog_keys"


# ---- Storage layout ----
CONFIG_STORAGE_KEY = "config"
ROLE_STORAGE_PREFIX = "role/"


# ---- SQLite config (infrastructure) ----
SQLITE_BUSY_TIMEOUT_MS = 5000
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"
SQLITE_DEFAULT_DB_NAME = "datadog_secrets.db"


# ---- Service / HTTP layer ----
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 8092
