"""GroupLookup protocol for resolving user group memberships.

Port (interface) for hexagonal architecture. Group membership is owned by
the user administration side of the system; the authorization engine only
needs the current memberships of one user at evaluation time.
"""

from typing import Protocol


class GroupLookup(Protocol):
    """Group membership lookup protocol (port).

    The result is authoritative for the evaluation instant; no staleness
    guarantees hold across calls.
    """

    async def groups_for_user(self, user_id: str) -> set[str]:
        """Resolve the group ids a user currently belongs to.

        Args:
            user_id: User id.

        Returns:
            set[str]: Group ids (empty if the user belongs to no group).
        """
        ...
