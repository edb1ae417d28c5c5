"""Authorization DTOs (Data Transfer Objects).

Result dataclasses returned by the policy command and query handlers. They
keep domain entities from leaking into the presentation layer.

DTOs:
    - PolicyResult: One permission policy (system or custom)
    - AuthorizationResult: Outcome of an authorization check
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.value_objects.decision import Decision


@dataclass
class PolicyResult:
    """Permission policy result DTO.

    Attributes:
        id: Policy id.
        profile_id: Owning profile (None for system policies).
        subject_urn: Subject in URN form (e.g., "role:READER").
        action_pattern: Action pattern.
        resource_pattern: Resource pattern.
        effect: "ALLOW" or "DENY".
        description: Human-readable description.
        is_system: Whether the policy comes from the role registry.
        created_by: Author id.
        created_at: Creation timestamp.
        updated_at: Last description revision.
    """

    id: str
    profile_id: str | None
    subject_urn: str
    action_pattern: str
    resource_pattern: str
    effect: str
    description: str
    is_system: bool
    created_by: str
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, policy: PermissionPolicy) -> "PolicyResult":
        """Map a domain policy to its DTO."""
        return cls(
            id=policy.id,
            profile_id=policy.profile_id,
            subject_urn=policy.subject.to_urn(),
            action_pattern=policy.action.value,
            resource_pattern=policy.resource.value,
            effect=policy.effect.value,
            description=policy.description,
            is_system=policy.is_system,
            created_by=policy.created_by,
            created_at=policy.created_at,
            updated_at=policy.updated_at,
        )


@dataclass
class AuthorizationResult:
    """Authorization check result DTO.

    Attributes:
        allowed: Whether the action is permitted.
        reason: Human-readable explanation.
        effective_effect: "ALLOW", "DENY" or None when nothing matched.
        matching_policy_ids: Ids of every matched policy, for audit.
    """

    allowed: bool
    reason: str
    effective_effect: str | None
    matching_policy_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_decision(cls, decision: Decision) -> "AuthorizationResult":
        """Map an engine decision to its DTO."""
        return cls(
            allowed=decision.allowed,
            reason=decision.reason,
            effective_effect=(
                decision.effective_effect.value if decision.effective_effect else None
            ),
            matching_policy_ids=[p.id for p in decision.matching_policies],
        )
