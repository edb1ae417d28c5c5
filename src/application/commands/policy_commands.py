"""Permission policy commands (CQRS write operations).

Commands represent intent to change custom policies. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate, execute and emit events
- Handlers return Result types

Commands carry raw strings; handlers parse them into value objects so that
malformed input becomes a ValidationError instead of an exception.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreatePermissionPolicy:
    """Create a custom policy within a profile.

    Attributes:
        profile_id: Owning profile.
        subject_urn: Subject URN (e.g., "user:abc123", "role:READER").
        action_pattern: Action pattern (e.g., "report.*").
        created_by: Author id.
        resource_pattern: Resource pattern; None means "*".
        effect: "ALLOW" or "DENY" (case-insensitive).
        description: Human-readable description.

    Example:
        >>> command = CreatePermissionPolicy(
        ...     profile_id="profile-1",
        ...     subject_urn="user:u-1",
        ...     action_pattern="sensitive.action",
        ...     effect="DENY",
        ...     created_by="admin-1",
        ... )
        >>> result = await handler.handle(command)
    """

    profile_id: str
    subject_urn: str
    action_pattern: str
    created_by: str
    resource_pattern: str | None = None
    effect: str = "ALLOW"
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class UpdatePermissionPolicy:
    """Revise the description of a custom policy.

    Subject, action, resource and effect are fixed at creation; replace the
    policy (delete + create) to change them.

    Attributes:
        policy_id: Target policy.
        description: New description.
        updated_by: Who is making the change.
    """

    policy_id: str
    description: str
    updated_by: str


@dataclass(frozen=True, kw_only=True)
class DeletePermissionPolicy:
    """Delete a custom policy.

    Attributes:
        policy_id: Target policy.
        deleted_by: Who is deleting the policy.
    """

    policy_id: str
    deleted_by: str
