"""Models parts package: one concept per module, re-exported by base.models."""

from .credentials import IssuedCredentialSet
from .key_type import KeyType
from .lease import IssueResult, Lease
from .provider_config import ProviderConfig
from .role import Role

__all__ = ["KeyType", "ProviderConfig", "Role", "IssuedCredentialSet", "Lease", "IssueResult"]
