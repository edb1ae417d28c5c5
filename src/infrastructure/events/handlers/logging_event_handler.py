"""Logging event handler for policy lifecycle events.

Subscribes to the 9 policy lifecycle events and logs them with structured
fields for observability and audit.

Log Levels:
    - INFO: ATTEMPTED and SUCCEEDED events (normal operations)
    - WARNING: FAILED events (rejected or broken writes)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - policy_id / profile_id: Policy and tenant (when available)
    - requested_by: Who asked for the change
    - reason: Machine-readable failure reason (for FAILED events)

Usage:
    >>> event_bus = get_event_bus()  # container wires subscriptions
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     PolicyCreationSucceeded, handler.handle_policy_creation_succeeded
    ... )
"""

from src.domain.events.policy_events import (
    PolicyCreationAttempted,
    PolicyCreationFailed,
    PolicyCreationSucceeded,
    PolicyDeletionAttempted,
    PolicyDeletionFailed,
    PolicyDeletionSucceeded,
    PolicyUpdateAttempted,
    PolicyUpdateFailed,
    PolicyUpdateSucceeded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of policy lifecycle events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    # =========================================================================
    # Policy Creation Event Handlers
    # =========================================================================

    async def handle_policy_creation_attempted(
        self,
        event: PolicyCreationAttempted,
    ) -> None:
        """Log policy creation attempt (INFO level)."""
        self._logger.info(
            "policy_creation_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            profile_id=event.profile_id,
            subject_urn=event.subject_urn,
            action_pattern=event.action_pattern,
            effect=event.effect,
            requested_by=event.requested_by,
        )

    async def handle_policy_creation_succeeded(
        self,
        event: PolicyCreationSucceeded,
    ) -> None:
        """Log successful policy creation (INFO level)."""
        self._logger.info(
            "policy_creation_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            profile_id=event.profile_id,
            subject_urn=event.subject_urn,
            action_pattern=event.action_pattern,
            resource_pattern=event.resource_pattern,
            effect=event.effect,
            requested_by=event.requested_by,
        )

    async def handle_policy_creation_failed(
        self,
        event: PolicyCreationFailed,
    ) -> None:
        """Log failed policy creation (WARNING level)."""
        self._logger.warning(
            "policy_creation_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            profile_id=event.profile_id,
            subject_urn=event.subject_urn,
            action_pattern=event.action_pattern,
            requested_by=event.requested_by,
            reason=event.reason,
        )

    # =========================================================================
    # Policy Update Event Handlers
    # =========================================================================

    async def handle_policy_update_attempted(
        self,
        event: PolicyUpdateAttempted,
    ) -> None:
        """Log policy update attempt (INFO level)."""
        self._logger.info(
            "policy_update_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            requested_by=event.requested_by,
        )

    async def handle_policy_update_succeeded(
        self,
        event: PolicyUpdateSucceeded,
    ) -> None:
        """Log successful policy update (INFO level)."""
        self._logger.info(
            "policy_update_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            profile_id=event.profile_id,
            requested_by=event.requested_by,
        )

    async def handle_policy_update_failed(
        self,
        event: PolicyUpdateFailed,
    ) -> None:
        """Log failed policy update (WARNING level)."""
        self._logger.warning(
            "policy_update_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            requested_by=event.requested_by,
            reason=event.reason,
        )

    # =========================================================================
    # Policy Deletion Event Handlers
    # =========================================================================

    async def handle_policy_deletion_attempted(
        self,
        event: PolicyDeletionAttempted,
    ) -> None:
        """Log policy deletion attempt (INFO level)."""
        self._logger.info(
            "policy_deletion_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            requested_by=event.requested_by,
        )

    async def handle_policy_deletion_succeeded(
        self,
        event: PolicyDeletionSucceeded,
    ) -> None:
        """Log successful policy deletion (INFO level)."""
        self._logger.info(
            "policy_deletion_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            profile_id=event.profile_id,
            requested_by=event.requested_by,
        )

    async def handle_policy_deletion_failed(
        self,
        event: PolicyDeletionFailed,
    ) -> None:
        """Log failed policy deletion (WARNING level)."""
        self._logger.warning(
            "policy_deletion_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            policy_id=event.policy_id,
            requested_by=event.requested_by,
            reason=event.reason,
        )
