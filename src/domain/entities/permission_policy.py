"""Permission policy domain entity.

A policy grants (ALLOW) or refuses (DENY) an action pattern on a resource
pattern to one subject. Two flavours exist:

    - system policies: built from the predefined role registry, no profile,
      never persisted, never modified
    - custom policies: authored for one profile, persisted by a PolicyStore,
      description may be revised

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types for lifecycle transitions
    - NO event collection (handlers create events)

Usage:
    from src.domain.entities import PermissionPolicy
    from src.domain.value_objects import Action, Subject

    policy = PermissionPolicy.create(
        profile_id="profile-1",
        subject=Subject.user("u-1"),
        action=Action.of("sensitive.action"),
        effect=PolicyEffect.DENY,
        description="Block sensitive action",
        created_by="admin-1",
    )
    policy.matches(Action.of("sensitive.action"), "account:123")  # True
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums.policy_effect import PolicyEffect
from src.domain.errors.permission_policy_error import PermissionPolicyError
from src.domain.value_objects.action import Action
from src.domain.value_objects.pattern import WILDCARD
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject

SYSTEM_AUTHOR = "SYSTEM"

# Creation time of every built-in policy (constant across calls).
SYSTEM_POLICY_CREATED_AT = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass
class PermissionPolicy:
    """Rule binding a subject to an action/resource pattern with an effect.

    Subject, action, resource and effect are fixed at creation. The only
    mutation is revise_description(), which refuses system policies.

    Attributes:
        id: Unique policy id (UUIDv7 string, or "system:role:..." for
            system policies).
        subject: Principal the policy applies to.
        action: Action pattern.
        resource: Resource pattern (defaults to "*").
        effect: ALLOW or DENY.
        profile_id: Owning profile; None for system policies.
        description: Human-readable description.
        is_system: True for registry-derived policies.
        created_by: Author id ("SYSTEM" for system policies).
        created_at: Creation timestamp.
        updated_at: Last description revision, None if never revised.
    """

    id: str
    subject: Subject
    action: Action
    resource: Resource = field(default_factory=Resource.all)
    effect: PolicyEffect = PolicyEffect.ALLOW
    profile_id: str | None = None
    description: str = ""
    is_system: bool = False
    created_by: str = SYSTEM_AUTHOR
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate policy after initialization.

        Raises:
            ValueError: If required fields are missing.
        """
        if not self.id or not self.id.strip():
            raise ValueError(PermissionPolicyError.ID_REQUIRED)

        if not self.is_system:
            if not self.profile_id:
                raise ValueError(PermissionPolicyError.PROFILE_REQUIRED)
            if not self.created_by:
                raise ValueError(PermissionPolicyError.CREATED_BY_REQUIRED)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        *,
        profile_id: str,
        subject: Subject,
        action: Action,
        created_by: str,
        resource: Resource | None = None,
        effect: PolicyEffect = PolicyEffect.ALLOW,
        description: str = "",
    ) -> "PermissionPolicy":
        """Create a new custom policy for a profile.

        Args:
            profile_id: Owning profile.
            subject: Principal the policy applies to.
            action: Action pattern.
            created_by: Author id.
            resource: Resource pattern (None means "*").
            effect: ALLOW (default) or DENY.
            description: Human-readable description.

        Returns:
            PermissionPolicy: New custom policy with a UUIDv7 id.

        Raises:
            ValueError: If profile_id or created_by is missing.
        """
        return cls(
            id=str(uuid7()),
            profile_id=profile_id,
            subject=subject,
            action=action,
            resource=resource or Resource.all(),
            effect=effect,
            description=description,
            is_system=False,
            created_by=created_by,
        )

    @classmethod
    def system(
        cls,
        *,
        policy_id: str,
        subject: Subject,
        action: Action,
        description: str,
    ) -> "PermissionPolicy":
        """Create a built-in ALLOW policy on every resource.

        Args:
            policy_id: Deterministic id ("system:role:<ROLE>:<suffix>").
            subject: Role subject.
            action: Action pattern.
            description: Human-readable description.

        Returns:
            PermissionPolicy: System policy (no profile, created by SYSTEM).
        """
        return cls(
            id=policy_id,
            subject=subject,
            action=action,
            resource=Resource.all(),
            effect=PolicyEffect.ALLOW,
            profile_id=None,
            description=description,
            is_system=True,
            created_by=SYSTEM_AUTHOR,
            created_at=SYSTEM_POLICY_CREATED_AT,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def matches_action(self, action: Action) -> bool:
        """Check if the action pattern matches a concrete action."""
        return self.action.matches(action)

    def matches_resource(self, resource_id: str | None) -> bool:
        """Check if the resource pattern matches a concrete resource.

        A missing resource id, or the wildcard "*", is not filtered.
        """
        if resource_id is None or resource_id == WILDCARD:
            return True
        return self.resource.matches(resource_id)

    def matches(self, action: Action, resource_id: str | None = None) -> bool:
        """Check if this policy matches a request.

        Args:
            action: Concrete requested action.
            resource_id: Concrete resource id, or None to skip resource filtering.

        Returns:
            bool: True if both action and resource match.
        """
        return self.matches_action(action) and self.matches_resource(resource_id)

    def applies_to(self, subject: Subject) -> bool:
        """Check if this policy targets the given subject."""
        return self.subject == subject

    def applies_to_any(self, subjects: Iterable[Subject]) -> bool:
        """Check if this policy targets any of the given subjects."""
        return any(self.applies_to(s) for s in subjects)

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def revise_description(self, description: str) -> Result[None, str]:
        """Replace the description of a custom policy.

        Args:
            description: New description.

        Returns:
            Success(None): Description updated.
            Failure(error): Policy is a system policy.

        Side Effects (on success):
            - Sets description
            - Updates updated_at
        """
        if self.is_system:
            return Failure(error=PermissionPolicyError.SYSTEM_POLICY_IMMUTABLE)

        self.description = description
        self.updated_at = datetime.now(UTC)
        return Success(value=None)
