"""Predefined role registry."""

from src.domain.roles.registry import (
    ROLE_REGISTRY,
    RoleMetadata,
    RolePolicyTemplate,
    get_all_role_names,
    get_role_metadata,
    get_system_policy,
    is_predefined_role,
    policies_for_role,
    policies_for_roles,
)

__all__ = [
    "ROLE_REGISTRY",
    "RoleMetadata",
    "RolePolicyTemplate",
    "get_all_role_names",
    "get_role_metadata",
    "get_system_policy",
    "is_predefined_role",
    "policies_for_role",
    "policies_for_roles",
]
