from __future__ import annotations

import pytest

from datadog_secrets.base.errors import (
    InvalidKeyTypeError,
    InvalidRoleNameError,
    MissingRoleNameError,
    RoleValidationError,
    TTLExceedsMaxTTLError,
)
from datadog_secrets.base.models import KeyType
from datadog_secrets.engine import normalize_scopes, validate_role


def test_defaults_applied():
    role = validate_role("r", "both")
    assert role.key_type is KeyType.BOTH  # nosec B101
    assert (role.ttl, role.max_ttl) == (3600, 86400)  # nosec B101
    assert role.scopes == []  # nosec B101


def test_key_type_is_case_insensitive():
    assert validate_role("r", "API_KEY").key_type is KeyType.API  # nosec B101


def test_invalid_key_type():
    with pytest.raises(InvalidKeyTypeError, match="invalid key_type"):
        validate_role("r", "invalid")


def test_name_checked_before_key_type():
    with pytest.raises(MissingRoleNameError):
        validate_role("", "invalid")


@pytest.mark.parametrize("name", ["team/web", "a b", "-lead", "trail-", ".", "caf\u00e9!"])
def test_malformed_name_rejected(name):
    with pytest.raises(InvalidRoleNameError, match="invalid role name"):
        validate_role(name, "both")


def test_malformed_name_checked_before_key_type():
    with pytest.raises(InvalidRoleNameError):
        validate_role("team/web", "invalid")


@pytest.mark.parametrize("name", ["r", "_", "web-prod.1", "a.b-c_d", "42"])
def test_well_formed_names_accepted(name):
    assert validate_role(name, "api_key").name == name  # nosec B101


def test_ttl_above_max_ttl_rejected():
    with pytest.raises(TTLExceedsMaxTTLError, match="cannot be greater than max_ttl"):
        validate_role("r", "api_key", ttl=7200, max_ttl=3600)


def test_ttl_equal_to_max_ttl_allowed():
    role = validate_role("r", "api_key", ttl=600, max_ttl=600)
    assert role.ttl == role.max_ttl == 600  # nosec B101


def test_explicit_ttl_against_default_max():
    with pytest.raises(TTLExceedsMaxTTLError):
        validate_role("r", "api_key", ttl=86401)


@pytest.mark.parametrize("bad", [-1, True, "60", 1.5])
def test_ttl_must_be_non_negative_int(bad):
    with pytest.raises(RoleValidationError):
        validate_role("r", "api_key", ttl=bad)


def test_normalize_scopes():
    assert normalize_scopes("a, b,,c ") == ["a", "b", "c"]  # nosec B101
    assert normalize_scopes(["x", " y "]) == ["x", "y"]  # nosec B101
    assert normalize_scopes(None) == []  # nosec B101
    with pytest.raises(RoleValidationError):
        normalize_scopes(["ok", 3])
