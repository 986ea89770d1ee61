"""DTO validation package for the HTTP surface."""

from .durations import parse_duration_seconds
from .requests import (
    ConfigWriteDTO,
    IssueRequestDTO,
    RenewRequestDTO,
    RevokeRequestDTO,
    RoleWriteDTO,
)

__all__ = [
    "ConfigWriteDTO",
    "RoleWriteDTO",
    "IssueRequestDTO",
    "RevokeRequestDTO",
    "RenewRequestDTO",
    "parse_duration_seconds",
]
