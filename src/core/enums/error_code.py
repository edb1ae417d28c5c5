"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Policy lifecycle errors (SYSTEM_POLICY_*)
- Collaborator errors (*_LOOKUP_FAILED, *_PERSISTENCE_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    POLICY_NOT_FOUND = "policy_not_found"

    # Policy lifecycle errors
    SYSTEM_POLICY_IMMUTABLE = "system_policy_immutable"

    # Collaborator errors (policy store or group lookup unreachable)
    POLICY_LOOKUP_FAILED = "policy_lookup_failed"
    POLICY_PERSISTENCE_FAILED = "policy_persistence_failed"
