"""Permission policy lifecycle events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: Operation initiated (before business logic)
- *Succeeded: Operation completed successfully (after the store write)
- *Failed: Operation failed (validation, not found, immutable, store failure)

Handlers:
- LoggingEventHandler: ALL 3 events

Authorization checks emit no events; they are logged by the engine.
"""

from dataclasses import dataclass

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Policy Creation (Workflow 1)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PolicyCreationAttempted(DomainEvent):
    """Custom policy creation initiated.

    Emitted BEFORE the request is validated, so malformed requests still
    leave an audit trail.

    Attributes:
        profile_id: Tenant the policy is scoped to.
        subject_urn: Raw subject URN from the request.
        action_pattern: Raw action pattern from the request.
        effect: Raw effect from the request.
        requested_by: Who asked for the policy.
    """

    profile_id: str
    subject_urn: str
    action_pattern: str
    effect: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyCreationSucceeded(DomainEvent):
    """Custom policy stored.

    Attributes:
        policy_id: Id assigned to the new policy.
        profile_id: Tenant the policy is scoped to.
        subject_urn: Canonical subject URN.
        action_pattern: Action pattern.
        resource_pattern: Resource pattern.
        effect: ALLOW or DENY.
        requested_by: Who created the policy.
    """

    policy_id: str
    profile_id: str
    subject_urn: str
    action_pattern: str
    resource_pattern: str
    effect: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyCreationFailed(DomainEvent):
    """Custom policy creation failed.

    Attributes:
        profile_id: Tenant the policy was meant for.
        subject_urn: Raw subject URN from the request.
        action_pattern: Raw action pattern from the request.
        requested_by: Who asked for the policy.
        reason: Validation message or error code (e.g., "policy_persistence_failed").
    """

    profile_id: str
    subject_urn: str
    action_pattern: str
    requested_by: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Policy Update (Workflow 2)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PolicyUpdateAttempted(DomainEvent):
    """Policy description revision initiated.

    Attributes:
        policy_id: Target policy id.
        requested_by: Who asked for the change.
    """

    policy_id: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyUpdateSucceeded(DomainEvent):
    """Policy description revised and stored.

    Attributes:
        policy_id: Updated policy id.
        profile_id: Tenant of the policy.
        requested_by: Who changed the policy.
    """

    policy_id: str
    profile_id: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyUpdateFailed(DomainEvent):
    """Policy update failed.

    Attributes:
        policy_id: Target policy id.
        requested_by: Who asked for the change.
        reason: Why the update failed (e.g., "system_policy_immutable").
    """

    policy_id: str
    requested_by: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Policy Deletion (Workflow 3)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PolicyDeletionAttempted(DomainEvent):
    """Policy deletion initiated.

    Attributes:
        policy_id: Target policy id.
        requested_by: Who asked for the deletion.
    """

    policy_id: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyDeletionSucceeded(DomainEvent):
    """Policy removed from the store.

    Attributes:
        policy_id: Deleted policy id.
        profile_id: Tenant of the deleted policy.
        requested_by: Who deleted the policy.
    """

    policy_id: str
    profile_id: str
    requested_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyDeletionFailed(DomainEvent):
    """Policy deletion failed.

    Attributes:
        policy_id: Target policy id.
        requested_by: Who asked for the deletion.
        reason: Why the deletion failed (e.g., "policy_not_found").
    """

    policy_id: str
    requested_by: str
    reason: str
