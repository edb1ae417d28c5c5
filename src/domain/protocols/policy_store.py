"""PolicyStore protocol for custom permission policy persistence.

Port (interface) for hexagonal architecture. Infrastructure layer implements
this protocol (in-memory for tests and development, SQLAlchemy for
production).

The store holds CUSTOM policies only. System policies come from the role
registry and must never be returned by a store.

Reference:
    - src/domain/roles/registry.py (system policies)
"""

from collections.abc import Iterable
from typing import Protocol

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.value_objects.subject import Subject


class PolicyStore(Protocol):
    """Custom policy store protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_profile_and_subjects: Evaluation hot path
        find_by_profile: All custom policies of a profile
        find_by_subject: Custom policies of one subject in a profile
        find_by_id: Retrieve policy by id
        save: Create or update policy
        delete_by_id: Remove policy

    Failure:
        Implementations raise on infrastructure failure (database
        unreachable). Callers treat that as an infrastructure error, never as
        an authorization decision.
    """

    async def find_by_profile_and_subjects(
        self,
        profile_id: str,
        subjects: Iterable[Subject],
    ) -> list[PermissionPolicy]:
        """Find custom policies of a profile targeting any of the subjects.

        Args:
            profile_id: Profile to search.
            subjects: Effective subject set of the request.

        Returns:
            list[PermissionPolicy]: Matching custom policies (empty if none).
        """
        ...

    async def find_by_profile(self, profile_id: str) -> list[PermissionPolicy]:
        """Find all custom policies of a profile."""
        ...

    async def find_by_subject(
        self,
        profile_id: str,
        subject: Subject,
    ) -> list[PermissionPolicy]:
        """Find custom policies of one subject within a profile."""
        ...

    async def find_by_id(self, policy_id: str) -> PermissionPolicy | None:
        """Find policy by id.

        Returns:
            PermissionPolicy if found, None otherwise.
        """
        ...

    async def save(self, policy: PermissionPolicy) -> None:
        """Create or update a policy (merge semantics)."""
        ...

    async def delete_by_id(self, policy_id: str) -> None:
        """Delete a policy by id (no-op if absent)."""
        ...
