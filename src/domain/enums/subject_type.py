"""Subject kinds for permission policies.

A policy applies to exactly one subject: a single user, a role, or a group
of users. The enum value is the lowercase prefix of the subject URN.

Usage:
    from src.domain.enums import SubjectType

    SubjectType.ROLE.value  # "role" (as in "role:READER")
"""

from enum import Enum


class SubjectType(str, Enum):
    """Kind of principal a policy applies to.

    String Enum:
        Values are the lowercase URN prefixes (user:..., role:..., group:...).
    """

    USER = "user"
    """A single user, identified by user id."""

    ROLE = "role"
    """An assigned role, identified by role name (e.g., READER)."""

    GROUP = "group"
    """A user group, identified by group id."""

    @classmethod
    def from_prefix(cls, prefix: str) -> "SubjectType":
        """Resolve a URN prefix (case-insensitive) to a subject type.

        Args:
            prefix: URN prefix such as "user" or "ROLE".

        Returns:
            SubjectType: Matching subject type.

        Raises:
            ValueError: If the prefix is not a known subject kind.
        """
        try:
            return cls(prefix.lower())
        except ValueError:
            raise ValueError(f"Unknown subject type: {prefix}") from None
