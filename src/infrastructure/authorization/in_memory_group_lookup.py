"""In-memory GroupLookup adapter.

Static user → groups table for tests and development. Production
deployments plug in a directory-backed adapter with the same shape.
"""

from collections.abc import Iterable, Mapping


class InMemoryGroupLookup:
    """Static group membership lookup.

    Example:
        >>> lookup = InMemoryGroupLookup({"u-1": ["ops", "emea"]})
        >>> await lookup.groups_for_user("u-1")
        {'ops', 'emea'}
        >>> await lookup.groups_for_user("unknown")
        set()
    """

    def __init__(self, memberships: Mapping[str, Iterable[str]] | None = None) -> None:
        self._memberships: dict[str, set[str]] = {
            user_id: set(groups) for user_id, groups in (memberships or {}).items()
        }

    async def groups_for_user(self, user_id: str) -> set[str]:
        """Return the user's group ids (a copy; empty if unknown)."""
        return set(self._memberships.get(user_id, ()))

    def add_member(self, user_id: str, group_id: str) -> None:
        """Add a user to a group."""
        self._memberships.setdefault(user_id, set()).add(group_id)

    def remove_member(self, user_id: str, group_id: str) -> None:
        """Remove a user from a group (no-op if not a member)."""
        self._memberships.get(user_id, set()).discard(group_id)
