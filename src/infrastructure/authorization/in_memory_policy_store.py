"""In-memory PolicyStore adapter.

Dictionary-backed store for tests, development and single-process
deployments (policy_store_type="memory").

Architecture:
    - Implements PolicyStore protocol (no inheritance)
    - Stores custom policies only; system policies are refused on save
    - Insertion-ordered results (dict preserves insertion order)
    - Holds and hands out copies, so callers never share stored entities
"""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.errors import PermissionPolicyError
from src.domain.value_objects.subject import Subject


class InMemoryPolicyStore:
    """In-memory custom policy store.

    Thread Safety:
        - NOT thread-safe (single event loop design)

    Example:
        >>> store = InMemoryPolicyStore()
        >>> await store.save(policy)
        >>> await store.find_by_profile("profile-1")
        [PermissionPolicy(...)]
    """

    def __init__(self, policies: Iterable[PermissionPolicy] = ()) -> None:
        """Initialize store, optionally seeded with policies.

        Raises:
            ValueError: If a seed policy is a system policy.
        """
        self._policies: dict[str, PermissionPolicy] = {}
        for policy in policies:
            self._put(policy)

    async def find_by_profile_and_subjects(
        self,
        profile_id: str,
        subjects: Iterable[Subject],
    ) -> list[PermissionPolicy]:
        wanted = set(subjects)
        return [
            replace(p)
            for p in self._policies.values()
            if p.profile_id == profile_id and p.subject in wanted
        ]

    async def find_by_profile(self, profile_id: str) -> list[PermissionPolicy]:
        return [replace(p) for p in self._policies.values() if p.profile_id == profile_id]

    async def find_by_subject(
        self,
        profile_id: str,
        subject: Subject,
    ) -> list[PermissionPolicy]:
        return [
            replace(p)
            for p in self._policies.values()
            if p.profile_id == profile_id and p.applies_to(subject)
        ]

    async def find_by_id(self, policy_id: str) -> PermissionPolicy | None:
        policy = self._policies.get(policy_id)
        return replace(policy) if policy is not None else None

    async def save(self, policy: PermissionPolicy) -> None:
        """Create or replace a custom policy.

        Raises:
            ValueError: If the policy is a system policy.
        """
        self._put(policy)

    async def delete_by_id(self, policy_id: str) -> None:
        self._policies.pop(policy_id, None)

    def _put(self, policy: PermissionPolicy) -> None:
        if policy.is_system:
            raise ValueError(PermissionPolicyError.SYSTEM_POLICY_IMMUTABLE)
        self._policies[policy.id] = replace(policy)
