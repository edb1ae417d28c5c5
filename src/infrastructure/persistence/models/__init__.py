"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the domain
layer. Domain entities live in src/domain/entities/ and are mapped to these
models by repositories.
"""

from src.infrastructure.persistence.models.permission_policy import (
    PermissionPolicy as PermissionPolicyModel,
)

__all__ = ["PermissionPolicyModel"]
