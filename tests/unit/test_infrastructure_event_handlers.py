"""Unit tests for LoggingEventHandler.

Tests cover:
- ATTEMPTED/SUCCEEDED events logged at INFO
- FAILED events logged at WARNING with reason
- Structured fields (event_id, occurred_at, policy fields)
"""

from unittest.mock import MagicMock

import pytest

from src.domain.events.policy_events import (
    PolicyCreationAttempted,
    PolicyCreationFailed,
    PolicyCreationSucceeded,
    PolicyDeletionFailed,
    PolicyDeletionSucceeded,
    PolicyUpdateAttempted,
)
from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler


@pytest.fixture
def handler_and_logger():
    logger = MagicMock()
    return LoggingEventHandler(logger=logger), logger


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test log level and fields per phase."""

    @pytest.mark.asyncio
    async def test_creation_attempted_logged_at_info(self, handler_and_logger):
        handler, logger = handler_and_logger
        event = PolicyCreationAttempted(
            profile_id="profile-1",
            subject_urn="user:u-1",
            action_pattern="sensitive.action",
            effect="DENY",
            requested_by="admin-1",
        )

        await handler.handle_policy_creation_attempted(event)

        logger.info.assert_called_once()
        assert logger.info.call_args.args[0] == "policy_creation_attempted"
        kwargs = logger.info.call_args.kwargs
        assert kwargs["event_id"] == str(event.event_id)
        assert kwargs["occurred_at"] == event.occurred_at.isoformat()
        assert kwargs["subject_urn"] == "user:u-1"
        assert kwargs["requested_by"] == "admin-1"

    @pytest.mark.asyncio
    async def test_creation_succeeded_logged_at_info(self, handler_and_logger):
        handler, logger = handler_and_logger
        event = PolicyCreationSucceeded(
            policy_id="p-1",
            profile_id="profile-1",
            subject_urn="user:u-1",
            action_pattern="sensitive.action",
            resource_pattern="*",
            effect="DENY",
            requested_by="admin-1",
        )

        await handler.handle_policy_creation_succeeded(event)

        assert logger.info.call_args.args[0] == "policy_creation_succeeded"
        assert logger.info.call_args.kwargs["policy_id"] == "p-1"

    @pytest.mark.asyncio
    async def test_creation_failed_logged_at_warning(self, handler_and_logger):
        handler, logger = handler_and_logger
        event = PolicyCreationFailed(
            profile_id="profile-1",
            subject_urn="team:x",
            action_pattern="a.b",
            requested_by="admin-1",
            reason="Unknown subject type: team",
        )

        await handler.handle_policy_creation_failed(event)

        logger.info.assert_not_called()
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "policy_creation_failed"
        assert logger.warning.call_args.kwargs["reason"] == "Unknown subject type: team"

    @pytest.mark.asyncio
    async def test_update_attempted(self, handler_and_logger):
        handler, logger = handler_and_logger

        await handler.handle_policy_update_attempted(
            PolicyUpdateAttempted(policy_id="p-1", requested_by="admin-1")
        )

        assert logger.info.call_args.args[0] == "policy_update_attempted"
        assert logger.info.call_args.kwargs["policy_id"] == "p-1"

    @pytest.mark.asyncio
    async def test_deletion_outcomes(self, handler_and_logger):
        handler, logger = handler_and_logger

        await handler.handle_policy_deletion_succeeded(
            PolicyDeletionSucceeded(policy_id="p-1", profile_id="profile-1", requested_by="admin-1")
        )
        await handler.handle_policy_deletion_failed(
            PolicyDeletionFailed(
                policy_id="system:role:READER:view",
                requested_by="admin-1",
                reason="system_policy_immutable",
            )
        )

        assert logger.info.call_args.args[0] == "policy_deletion_succeeded"
        assert logger.warning.call_args.args[0] == "policy_deletion_failed"
        assert logger.warning.call_args.kwargs["reason"] == "system_policy_immutable"
