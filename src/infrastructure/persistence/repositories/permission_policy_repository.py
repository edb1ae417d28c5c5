"""PermissionPolicyRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain PermissionPolicy entities and the permission_policies
table. Implements the PolicyStore protocol.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.enums.policy_effect import PolicyEffect
from src.domain.enums.subject_type import SubjectType
from src.domain.errors import PermissionPolicyError
from src.domain.value_objects.action import Action
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject
from src.infrastructure.persistence.models.permission_policy import (
    PermissionPolicy as PermissionPolicyModel,
)


class PermissionPolicyRepository:
    """SQLAlchemy implementation of PolicyStore protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = PermissionPolicyRepository(session)
        ...     policies = await repo.find_by_profile("profile-1")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

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
            List of policies ordered by creation (empty if none found).
        """
        subject_filters = [
            and_(
                PermissionPolicyModel.subject_type == s.type.value,
                PermissionPolicyModel.subject_id == s.identifier,
            )
            for s in set(subjects)
        ]
        if not subject_filters:
            return []

        stmt = (
            select(PermissionPolicyModel)
            .where(
                PermissionPolicyModel.profile_id == profile_id,
                or_(*subject_filters),
            )
            .order_by(PermissionPolicyModel.created_at, PermissionPolicyModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_profile(self, profile_id: str) -> list[PermissionPolicy]:
        """Find all custom policies of a profile.

        Args:
            profile_id: Profile to list.

        Returns:
            List of policies ordered by creation (empty if none found).
        """
        stmt = (
            select(PermissionPolicyModel)
            .where(PermissionPolicyModel.profile_id == profile_id)
            .order_by(PermissionPolicyModel.created_at, PermissionPolicyModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_subject(
        self,
        profile_id: str,
        subject: Subject,
    ) -> list[PermissionPolicy]:
        """Find custom policies of one subject within a profile."""
        return await self.find_by_profile_and_subjects(profile_id, [subject])

    async def find_by_id(self, policy_id: str) -> PermissionPolicy | None:
        """Find policy by id.

        Returns:
            Domain PermissionPolicy if found, None otherwise.
        """
        model = await self.session.get(PermissionPolicyModel, policy_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def save(self, policy: PermissionPolicy) -> None:
        """Create or update policy in database.

        Uses merge semantics - creates if not exists, updates if exists.

        Raises:
            ValueError: If the policy is a system policy.
        """
        if policy.is_system:
            raise ValueError(PermissionPolicyError.SYSTEM_POLICY_IMMUTABLE)

        existing = await self.session.get(PermissionPolicyModel, policy.id)

        if existing is None:
            self.session.add(self._to_model(policy))
        else:
            # Only the description changes after creation
            existing.description = policy.description
            existing.updated_at = policy.updated_at

        await self.session.commit()

    async def delete_by_id(self, policy_id: str) -> None:
        """Remove policy from database (no-op if absent).

        Hard delete - permanently removes the record.
        """
        stmt = delete(PermissionPolicyModel).where(PermissionPolicyModel.id == policy_id)
        await self.session.execute(stmt)
        await self.session.commit()

    def _to_domain(self, model: PermissionPolicyModel) -> PermissionPolicy:
        """Convert database model to domain entity."""
        return PermissionPolicy(
            id=model.id,
            profile_id=model.profile_id,
            subject=Subject(
                type=SubjectType(model.subject_type),
                identifier=model.subject_id,
            ),
            action=Action.of(model.action_pattern),
            resource=Resource.of(model.resource_pattern),
            effect=PolicyEffect(model.effect),
            description=model.description,
            is_system=model.is_system,
            created_by=model.created_by,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at) if model.updated_at else None,
        )

    def _to_model(self, entity: PermissionPolicy) -> PermissionPolicyModel:
        """Convert domain entity to database model."""
        return PermissionPolicyModel(
            id=entity.id,
            profile_id=entity.profile_id,
            subject_type=entity.subject.type.value,
            subject_id=entity.subject.identifier,
            action_pattern=entity.action.value,
            resource_pattern=entity.resource.value,
            effect=entity.effect.value,
            description=entity.description,
            is_system=entity.is_system,
            created_by=entity.created_by,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round trip
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
