"""Domain entities for authorization.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.permission_policy import PermissionPolicy

__all__ = [
    "PermissionPolicy",
]
