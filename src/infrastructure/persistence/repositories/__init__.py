"""Repository implementations (PolicyStore adapters backed by SQLAlchemy)."""

from src.infrastructure.persistence.repositories.permission_policy_repository import (
    PermissionPolicyRepository,
)

__all__ = ["PermissionPolicyRepository"]
