"""Predefined Role Registry - Single source of truth for built-in role policies.

Maps each canonical role name to the fixed set of system policies it grants.
System policies are built on demand from this table; they are never
persisted and never modified.

Registry Structure:
    - RolePolicyTemplate: One (action pattern, description) grant
    - RoleMetadata: Role name, description and its grants
    - ROLE_REGISTRY: Role name -> RoleMetadata (plain lookup table)
    - Helper Functions: Build system policies, query the table

Role Table (all ALLOW on resource "*"):
    SERVICE_ADMIN   *
    SECURITY_ADMIN  security.*
    READER          *.view
    CREATOR         *.create, *.update, *.delete
    APPROVER        *.approve

Note the asymmetry: SERVICE_ADMIN's bare "*" matches every action, while
CREATOR's leading "*" matches exactly one segment ("service.create" but not
"service.sub.create").

Usage:
    from src.domain.roles.registry import policies_for_roles

    policies = policies_for_roles({"READER", "CREATOR"})  # 4 policies
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.value_objects.action import Action
from src.domain.value_objects.subject import Subject

SYSTEM_POLICY_PREFIX = "system:role:"


@dataclass(frozen=True, kw_only=True)
class RolePolicyTemplate:
    """One grant of a predefined role.

    Attributes:
        suffix: Stable id suffix (system policy id is
            "system:role:<ROLE>:<suffix>").
        action_pattern: Action pattern granted.
        description: Human-readable description of the grant.
    """

    suffix: str
    action_pattern: str
    description: str


@dataclass(frozen=True, kw_only=True)
class RoleMetadata:
    """Metadata for a single predefined role.

    Attributes:
        name: Canonical role name (upper snake case).
        description: What the role is for.
        grants: Policies the role carries.
    """

    name: str
    description: str
    grants: tuple[RolePolicyTemplate, ...]


# =============================================================================
# Role Registry (Single Source of Truth)
# =============================================================================

ROLE_REGISTRY: dict[str, RoleMetadata] = {
    "SECURITY_ADMIN": RoleMetadata(
        name="SECURITY_ADMIN",
        description="All security-related actions",
        grants=(
            RolePolicyTemplate(
                suffix="security",
                action_pattern="security.*",
                description="Security admin can perform all security-related actions",
            ),
        ),
    ),
    "SERVICE_ADMIN": RoleMetadata(
        name="SERVICE_ADMIN",
        description="Full access to all services and settings",
        grants=(
            RolePolicyTemplate(
                suffix="all",
                action_pattern="*",
                description="Service admin has full access to all services and settings",
            ),
        ),
    ),
    "READER": RoleMetadata(
        name="READER",
        description="View all resources",
        grants=(
            RolePolicyTemplate(
                suffix="view",
                action_pattern="*.view",
                description="Reader can view all resources",
            ),
        ),
    ),
    "CREATOR": RoleMetadata(
        name="CREATOR",
        description="Create, update, and delete resources",
        grants=(
            RolePolicyTemplate(
                suffix="create",
                action_pattern="*.create",
                description="Creator can create resources",
            ),
            RolePolicyTemplate(
                suffix="update",
                action_pattern="*.update",
                description="Creator can update resources",
            ),
            RolePolicyTemplate(
                suffix="delete",
                action_pattern="*.delete",
                description="Creator can delete resources",
            ),
        ),
    ),
    "APPROVER": RoleMetadata(
        name="APPROVER",
        description="Approve pending items",
        grants=(
            RolePolicyTemplate(
                suffix="approve",
                action_pattern="*.approve",
                description="Approver can approve pending items",
            ),
        ),
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def system_policy_id(role_name: str, suffix: str) -> str:
    """Build the deterministic id of a system policy."""
    return f"{SYSTEM_POLICY_PREFIX}{role_name}:{suffix}"


def is_predefined_role(name: str) -> bool:
    """Check if a role name is in the registry (case-sensitive)."""
    return name in ROLE_REGISTRY


def get_role_metadata(name: str) -> RoleMetadata | None:
    """Get role metadata by name, or None for unknown roles."""
    return ROLE_REGISTRY.get(name)


def get_all_role_names() -> list[str]:
    """Get all predefined role names, sorted."""
    return sorted(ROLE_REGISTRY)


def policies_for_role(name: str) -> list[PermissionPolicy]:
    """Build the system policies of one role.

    Args:
        name: Role name.

    Returns:
        list[PermissionPolicy]: System policies; empty for unknown roles
            (fail-closed).

    Example:
        >>> [p.action.value for p in policies_for_role("CREATOR")]
        ['*.create', '*.update', '*.delete']
        >>> policies_for_role("UNKNOWN")
        []
    """
    metadata = get_role_metadata(name)
    if metadata is None:
        return []

    subject = Subject.role(metadata.name)
    return [
        PermissionPolicy.system(
            policy_id=system_policy_id(metadata.name, grant.suffix),
            subject=subject,
            action=Action.of(grant.action_pattern),
            description=grant.description,
        )
        for grant in metadata.grants
    ]


def policies_for_roles(names: Iterable[str]) -> list[PermissionPolicy]:
    """Build the system policies of several roles.

    Roles are visited in sorted order so the result is deterministic.
    Unknown names contribute nothing.

    Args:
        names: Role names.

    Returns:
        list[PermissionPolicy]: Concatenated system policies.
    """
    policies: list[PermissionPolicy] = []
    for name in sorted(set(names)):
        policies.extend(policies_for_role(name))
    return policies


def is_system_policy_id(policy_id: str) -> bool:
    """Check if an id uses the system policy namespace."""
    return policy_id.startswith(SYSTEM_POLICY_PREFIX)


def get_system_policy(policy_id: str) -> PermissionPolicy | None:
    """Resolve a system policy id back to its policy.

    Args:
        policy_id: Candidate id ("system:role:<ROLE>:<suffix>").

    Returns:
        PermissionPolicy if the id names a registry grant, None otherwise.
    """
    if not is_system_policy_id(policy_id):
        return None

    role_name, _, _ = policy_id.removeprefix(SYSTEM_POLICY_PREFIX).partition(":")
    return next(
        (p for p in policies_for_role(role_name) if p.id == policy_id),
        None,
    )
