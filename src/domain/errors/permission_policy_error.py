"""Permission policy domain errors.

Defines policy-specific error constants for entity construction and
lifecycle transitions, plus the structured ImmutablePolicyError returned by
command handlers.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import PermissionPolicyError
    from src.core.result import Failure

    if self.is_system:
        return Failure(error=PermissionPolicyError.SYSTEM_POLICY_IMMUTABLE)
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


class PermissionPolicyError:
    """Permission policy error constants.

    Used in Result types and ValueError messages for policy failures.
    These are NOT exceptions - they are error value constants.

    Error Categories:
        - Lifecycle errors: SYSTEM_POLICY_IMMUTABLE
        - Construction errors: PROFILE_REQUIRED, CREATED_BY_REQUIRED, ID_REQUIRED
    """

    SYSTEM_POLICY_IMMUTABLE = "Cannot modify system policy"
    """System policies come from the role registry and never change."""

    POLICY_NOT_FOUND = "Policy not found"
    """No policy exists with the given id."""

    PROFILE_REQUIRED = "profile_id is required for custom policies"
    """Every custom policy belongs to exactly one profile."""

    CREATED_BY_REQUIRED = "created_by is required"
    """Custom policies record their author."""

    ID_REQUIRED = "Policy id cannot be blank"
    """Policies are addressed by id for update and delete."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ImmutablePolicyError(DomainError):
    """Update or delete attempted on a system policy.

    Attributes:
        code: ErrorCode.SYSTEM_POLICY_IMMUTABLE.
        message: "Cannot modify system policy".
        policy_id: Id of the system policy that was targeted.
    """

    policy_id: str
