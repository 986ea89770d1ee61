"""Record of the credential values minted by one issuance.

The set is embedded verbatim in the lease's internal data and is the only
input to revocation: which keys to delete is never re-derived from the role,
which may have changed or been deleted since issuance.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ...config.defaults import SECRET_TYPE
from ..errors_parts.validation_errors import InvalidKeyTypeError, LeaseDataError
from .key_type import KeyType


@dataclass(frozen=True, repr=False)
class IssuedCredentialSet:
    """Credential values created for a single lease.

    Attributes:
        key_type: Key type copied from the role at issuance time.
        api_key: Created API key value, if any.
        app_key: Created application key value, if any.
    """

    key_type: KeyType
    api_key: Optional[str] = None
    app_key: Optional[str] = None

    def response_data(self) -> Dict[str, str]:
        """Caller-visible payload containing only the keys actually minted."""
        data: Dict[str, str] = {}
        if self.api_key:
            data["api_key"] = self.api_key
        if self.app_key:
            data["app_key"] = self.app_key
        return data

    def to_internal_data(self) -> Dict[str, Any]:
        """Serialize into the opaque lease internal data handed to the host."""
        return {
            "secret_type": SECRET_TYPE,
            "key_type": self.key_type.value,
            "api_key": self.api_key or "",
            "app_key": self.app_key or "",
        }

    @classmethod
    def from_internal_data(cls, data: Mapping[str, Any]) -> "IssuedCredentialSet":
        """Parse lease internal data produced by :meth:`to_internal_data`.

        Empty strings are read back as "not minted".

        Raises:
            LeaseDataError: when the mapping is malformed.
        """
        if not isinstance(data, Mapping):
            raise LeaseDataError("lease internal data must be a mapping")
        secret_type = data.get("secret_type")
        if secret_type is not None and secret_type != SECRET_TYPE:
            raise LeaseDataError(f"unexpected secret_type {secret_type!r}")
        try:
            key_type = KeyType.parse(data.get("key_type"))
        except InvalidKeyTypeError as exc:
            raise LeaseDataError(f"lease internal data has {exc}") from exc
        values = {}
        for field_name in ("api_key", "app_key"):
            raw = data.get(field_name)
            if raw is not None and not isinstance(raw, str):
                raise LeaseDataError(f"{field_name} must be a string")
            values[field_name] = raw or None
        return cls(key_type=key_type, **values)

    def __repr__(self) -> str:
        minted = ",".join(k for k in ("api_key", "app_key") if getattr(self, k)) or "none"
        return f"IssuedCredentialSet(key_type={self.key_type.value!r}, minted={minted})"


__all__ = ["IssuedCredentialSet"]
