"""Public surface for engine domain models.

Concrete dataclasses live under ``datadog_secrets.base.models_parts``; import
them from here for a stable path.
"""

from .models_parts.credentials import IssuedCredentialSet
from .models_parts.key_type import KeyType
from .models_parts.lease import IssueResult, Lease
from .models_parts.provider_config import ProviderConfig
from .models_parts.role import Role

__all__ = ["KeyType", "ProviderConfig", "Role", "IssuedCredentialSet", "Lease", "IssueResult"]
