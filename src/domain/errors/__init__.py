"""Domain errors package.

Usage:
    from src.domain.errors import ImmutablePolicyError, PermissionPolicyError
"""

from src.domain.errors.permission_policy_error import (
    ImmutablePolicyError,
    PermissionPolicyError,
)

__all__ = [
    "ImmutablePolicyError",
    "PermissionPolicyError",
]
