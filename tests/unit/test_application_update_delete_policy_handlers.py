"""Unit tests for UpdatePolicyHandler and DeletePolicyHandler.

Tests cover:
- Description revision of custom policies
- Deletion of custom policies
- System policies refused (registry ids and stored is_system policies)
- Policy not found
- Store failures mapped to InfrastructureError
- 3-state event emission

Architecture:
- Unit tests with mocked PolicyStore and EventBus
"""

from unittest.mock import AsyncMock

import pytest

from src.application.commands.handlers.delete_policy_handler import DeletePolicyHandler
from src.application.commands.handlers.update_policy_handler import UpdatePolicyHandler
from src.application.commands.policy_commands import (
    DeletePermissionPolicy,
    UpdatePermissionPolicy,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.errors import ImmutablePolicyError
from src.domain.events.policy_events import (
    PolicyDeletionAttempted,
    PolicyDeletionFailed,
    PolicyDeletionSucceeded,
    PolicyUpdateAttempted,
    PolicyUpdateFailed,
    PolicyUpdateSucceeded,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.value_objects.action import Action
from src.domain.value_objects.subject import Subject
from src.infrastructure.errors import InfrastructureError
from tests.conftest import ADMIN_ID, create_policy, published_event_types

SYSTEM_POLICY_ID = "system:role:READER:view"


# =============================================================================
# Test Helpers
# =============================================================================


def create_handlers():
    """Helper to create both handlers over shared mocks.

    Returns:
        tuple: (update_handler, delete_handler, store, event_bus)
    """
    store = AsyncMock(spec=PolicyStore)
    store.find_by_id.return_value = None
    event_bus = AsyncMock(spec=EventBusProtocol)
    update_handler = UpdatePolicyHandler(policy_store=store, event_bus=event_bus)
    delete_handler = DeletePolicyHandler(policy_store=store, event_bus=event_bus)
    return update_handler, delete_handler, store, event_bus


def stored_system_policy() -> PermissionPolicy:
    """A system-flagged policy as a misbehaving store might return it."""
    return PermissionPolicy.system(
        policy_id="legacy-system-policy",
        subject=Subject.role("READER"),
        action=Action.of("*.view"),
        description="legacy",
    )


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestUpdatePolicy:
    """Test UpdatePolicyHandler."""

    @pytest.mark.asyncio
    async def test_revises_description(self):
        # Arrange
        update_handler, _, store, event_bus = create_handlers()
        policy = create_policy(description="old")
        store.find_by_id.return_value = policy

        # Act
        result = await update_handler.handle(
            UpdatePermissionPolicy(policy_id=policy.id, description="new", updated_by=ADMIN_ID)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.description == "new"
        assert result.value.updated_at is not None
        store.save.assert_awaited_once_with(policy)
        assert published_event_types(event_bus) == [
            PolicyUpdateAttempted,
            PolicyUpdateSucceeded,
        ]

    @pytest.mark.asyncio
    async def test_registry_policy_is_immutable(self):
        update_handler, _, store, event_bus = create_handlers()

        result = await update_handler.handle(
            UpdatePermissionPolicy(policy_id=SYSTEM_POLICY_ID, description="x", updated_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ImmutablePolicyError)
        assert result.error.code == ErrorCode.SYSTEM_POLICY_IMMUTABLE
        assert result.error.message == "Cannot modify system policy"
        assert result.error.policy_id == SYSTEM_POLICY_ID
        store.find_by_id.assert_not_called()
        store.save.assert_not_called()
        assert published_event_types(event_bus) == [
            PolicyUpdateAttempted,
            PolicyUpdateFailed,
        ]

    @pytest.mark.asyncio
    async def test_stored_system_policy_is_immutable(self):
        update_handler, _, store, _ = create_handlers()
        policy = stored_system_policy()
        store.find_by_id.return_value = policy

        result = await update_handler.handle(
            UpdatePermissionPolicy(policy_id=policy.id, description="x", updated_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ImmutablePolicyError)
        assert policy.description == "legacy"
        store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_found(self):
        update_handler, _, store, event_bus = create_handlers()

        result = await update_handler.handle(
            UpdatePermissionPolicy(policy_id="missing", description="x", updated_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.POLICY_NOT_FOUND
        assert result.error.resource_id == "missing"
        store.save.assert_not_called()
        failed = event_bus.publish.call_args_list[-1].args[0]
        assert failed.reason == ErrorCode.POLICY_NOT_FOUND.value

    @pytest.mark.asyncio
    async def test_store_failure(self):
        update_handler, _, store, _ = create_handlers()
        store.find_by_id.side_effect = ConnectionError("db down")

        result = await update_handler.handle(
            UpdatePermissionPolicy(policy_id="any", description="x", updated_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InfrastructureError)
        assert result.error.code == ErrorCode.POLICY_PERSISTENCE_FAILED


# =============================================================================
# Delete
# =============================================================================


@pytest.mark.unit
class TestDeletePolicy:
    """Test DeletePolicyHandler."""

    @pytest.mark.asyncio
    async def test_deletes_custom_policy(self):
        _, delete_handler, store, event_bus = create_handlers()
        policy = create_policy()
        store.find_by_id.return_value = policy

        result = await delete_handler.handle(
            DeletePermissionPolicy(policy_id=policy.id, deleted_by=ADMIN_ID)
        )

        assert isinstance(result, Success)
        assert result.value is None
        store.delete_by_id.assert_awaited_once_with(policy.id)
        assert published_event_types(event_bus) == [
            PolicyDeletionAttempted,
            PolicyDeletionSucceeded,
        ]
        succeeded = event_bus.publish.call_args_list[-1].args[0]
        assert succeeded.profile_id == policy.profile_id

    @pytest.mark.asyncio
    async def test_registry_policy_is_immutable(self):
        _, delete_handler, store, event_bus = create_handlers()

        result = await delete_handler.handle(
            DeletePermissionPolicy(policy_id=SYSTEM_POLICY_ID, deleted_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ImmutablePolicyError)
        store.delete_by_id.assert_not_called()
        assert published_event_types(event_bus) == [
            PolicyDeletionAttempted,
            PolicyDeletionFailed,
        ]

    @pytest.mark.asyncio
    async def test_stored_system_policy_is_immutable(self):
        _, delete_handler, store, _ = create_handlers()
        store.find_by_id.return_value = stored_system_policy()

        result = await delete_handler.handle(
            DeletePermissionPolicy(policy_id="legacy-system-policy", deleted_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ImmutablePolicyError)
        store.delete_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_found(self):
        _, delete_handler, store, _ = create_handlers()

        result = await delete_handler.handle(
            DeletePermissionPolicy(policy_id="missing", deleted_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        store.delete_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure(self):
        _, delete_handler, store, event_bus = create_handlers()
        store.find_by_id.return_value = create_policy()
        store.delete_by_id.side_effect = ConnectionError("db down")

        result = await delete_handler.handle(
            DeletePermissionPolicy(policy_id="any", deleted_by=ADMIN_ID)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InfrastructureError)
        assert result.error.details == {"error": "db down"}
        assert isinstance(event_bus.publish.call_args_list[-1].args[0], PolicyDeletionFailed)
