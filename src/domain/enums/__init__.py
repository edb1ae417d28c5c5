"""Domain enums for permission policies.

Usage:
    from src.domain.enums import PolicyEffect, SubjectType
"""

from src.domain.enums.policy_effect import PolicyEffect
from src.domain.enums.subject_type import SubjectType

__all__ = [
    "PolicyEffect",
    "SubjectType",
]
