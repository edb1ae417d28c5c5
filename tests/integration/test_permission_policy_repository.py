"""Integration tests for PermissionPolicyRepository.

Tests cover:
- Save and retrieve policy (entity ↔ model mapping)
- Find by profile and subject set
- Find by subject
- Description update (merge semantics)
- Delete policy
- System policies refused

Architecture:
- Integration tests with a REAL SQLite database (aiosqlite)
- Fresh database file per test
"""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from src.domain.enums.policy_effect import PolicyEffect
from src.domain.roles.registry import policies_for_role
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories.permission_policy_repository import (
    PermissionPolicyRepository,
)
from tests.conftest import OTHER_PROFILE_ID, PROFILE_ID, create_policy


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    """Fresh SQLite database with all tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'policies.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest.mark.integration
class TestPermissionPolicyRepository:
    """Test repository against a real database."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, database):
        policy = create_policy(
            subject=Subject.group("ops:emea"),
            action="report.*",
            resource="account:1,account:2",
            effect=PolicyEffect.DENY,
            description="Block reports",
        )

        async with database.get_session() as session:
            await PermissionPolicyRepository(session).save(policy)

        async with database.get_session() as session:
            found = await PermissionPolicyRepository(session).find_by_id(policy.id)

        assert found is not None
        assert found.id == policy.id
        assert found.profile_id == PROFILE_ID
        assert found.subject == Subject.group("ops:emea")
        assert found.action.value == "report.*"
        assert found.resource == Resource.of("account:1,account:2")
        assert found.effect == PolicyEffect.DENY
        assert found.description == "Block reports"
        assert found.is_system is False
        assert found.created_at.tzinfo is not None
        assert found.updated_at is None

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, database):
        async with database.get_session() as session:
            assert await PermissionPolicyRepository(session).find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_by_profile_and_subjects(self, database):
        user_policy = create_policy(subject=Subject.user("u-1"))
        group_policy = create_policy(subject=Subject.group("g-1"))
        other_user = create_policy(subject=Subject.user("u-2"))
        other_profile = create_policy(profile_id=OTHER_PROFILE_ID)

        async with database.get_session() as session:
            repo = PermissionPolicyRepository(session)
            for policy in (user_policy, group_policy, other_user, other_profile):
                await repo.save(policy)

        async with database.get_session() as session:
            found = await PermissionPolicyRepository(session).find_by_profile_and_subjects(
                PROFILE_ID, [Subject.user("u-1"), Subject.group("g-1"), Subject.role("READER")]
            )

        assert {p.id for p in found} == {user_policy.id, group_policy.id}

    @pytest.mark.asyncio
    async def test_find_by_profile_and_empty_subjects(self, database):
        async with database.get_session() as session:
            repo = PermissionPolicyRepository(session)
            await repo.save(create_policy())

            assert await repo.find_by_profile_and_subjects(PROFILE_ID, []) == []

    @pytest.mark.asyncio
    async def test_subject_type_distinguishes_same_identifier(self, database):
        user_policy = create_policy(subject=Subject.user("x"))
        group_policy = create_policy(subject=Subject.group("x"))

        async with database.get_session() as session:
            repo = PermissionPolicyRepository(session)
            await repo.save(user_policy)
            await repo.save(group_policy)

            found = await repo.find_by_subject(PROFILE_ID, Subject.group("x"))

        assert [p.id for p in found] == [group_policy.id]

    @pytest.mark.asyncio
    async def test_find_by_profile(self, database):
        mine = [create_policy(), create_policy(action="report.export")]

        async with database.get_session() as session:
            repo = PermissionPolicyRepository(session)
            for policy in mine:
                await repo.save(policy)
            await repo.save(create_policy(profile_id=OTHER_PROFILE_ID))

            found = await repo.find_by_profile(PROFILE_ID)

        assert {p.id for p in found} == {p.id for p in mine}

    @pytest.mark.asyncio
    async def test_save_updates_description(self, database):
        policy = create_policy(description="old")

        async with database.get_session() as session:
            await PermissionPolicyRepository(session).save(policy)

        policy.revise_description("new")
        async with database.get_session() as session:
            await PermissionPolicyRepository(session).save(policy)

        async with database.get_session() as session:
            found = await PermissionPolicyRepository(session).find_by_id(policy.id)

        assert found.description == "new"
        assert found.updated_at is not None

    @pytest.mark.asyncio
    async def test_delete_by_id(self, database):
        policy = create_policy()

        async with database.get_session() as session:
            repo = PermissionPolicyRepository(session)
            await repo.save(policy)
            await repo.delete_by_id(policy.id)
            await repo.delete_by_id(policy.id)

        async with database.get_session() as session:
            assert await PermissionPolicyRepository(session).find_by_id(policy.id) is None

    @pytest.mark.asyncio
    async def test_refuses_system_policy(self, database):
        async with database.get_session() as session:
            with pytest.raises(ValueError):
                await PermissionPolicyRepository(session).save(policies_for_role("READER")[0])

    @pytest.mark.asyncio
    async def test_check_connection(self, database):
        assert await database.check_connection() is True
