"""DeletePermissionPolicy command handler.

Removes a custom policy. System policies (registry ids or stored policies
flagged is_system) are refused and the store is left untouched.

Architecture:
- Application layer handler (orchestrates business logic)
- Uses Result types for error handling
- Emits 3-state domain events (Attempted → Succeeded/Failed)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.policy_commands import DeletePermissionPolicy
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import ImmutablePolicyError, PermissionPolicyError
from src.domain.events.policy_events import (
    PolicyDeletionAttempted,
    PolicyDeletionFailed,
    PolicyDeletionSucceeded,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.roles.registry import get_system_policy
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import InfrastructureError


class DeletePolicyHandler:
    """Handler for DeletePermissionPolicy command.

    Dependencies (injected via constructor):
        - PolicyStore: For retrieval and deletion
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        policy_store: PolicyStore,
        event_bus: EventBusProtocol,
    ) -> None:
        self._policy_store = policy_store
        self._event_bus = event_bus

    async def handle(self, cmd: DeletePermissionPolicy) -> Result[None, DomainError]:
        """Handle DeletePermissionPolicy command.

        Args:
            cmd: DeletePermissionPolicy command.

        Returns:
            Success(None): Policy deleted.
            Failure(ImmutablePolicyError): Target is a system policy.
            Failure(NotFoundError): No policy with that id.
            Failure(InfrastructureError): Store read or delete failed.

        Side Effects:
            - Publishes PolicyDeletionAttempted event (always)
            - Publishes PolicyDeletionSucceeded event (on success)
            - Publishes PolicyDeletionFailed event (on failure)
        """
        await self._event_bus.publish(
            PolicyDeletionAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=cmd.policy_id,
                requested_by=cmd.deleted_by,
            )
        )

        if get_system_policy(cmd.policy_id) is not None:
            return await self._fail(cmd, _immutable(cmd.policy_id))

        try:
            policy = await self._policy_store.find_by_id(cmd.policy_id)
            if policy is None:
                return await self._fail(
                    cmd,
                    NotFoundError(
                        code=ErrorCode.POLICY_NOT_FOUND,
                        message=PermissionPolicyError.POLICY_NOT_FOUND,
                        resource_type="PermissionPolicy",
                        resource_id=cmd.policy_id,
                    ),
                )

            if policy.is_system:
                return await self._fail(cmd, _immutable(cmd.policy_id))

            await self._policy_store.delete_by_id(cmd.policy_id)
        except Exception as e:
            return await self._fail(
                cmd,
                InfrastructureError(
                    code=ErrorCode.POLICY_PERSISTENCE_FAILED,
                    message="Failed to delete permission policy",
                    infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
                    details={"error": str(e)},
                ),
            )

        await self._event_bus.publish(
            PolicyDeletionSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=cmd.policy_id,
                profile_id=policy.profile_id or "",
                requested_by=cmd.deleted_by,
            )
        )

        return Success(value=None)

    async def _fail(
        self, cmd: DeletePermissionPolicy, error: DomainError
    ) -> Failure[DomainError]:
        """Emit PolicyDeletionFailed event and wrap the error."""
        await self._event_bus.publish(
            PolicyDeletionFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=cmd.policy_id,
                requested_by=cmd.deleted_by,
                reason=error.code.value,
            )
        )
        return Failure(error=error)


def _immutable(policy_id: str) -> ImmutablePolicyError:
    return ImmutablePolicyError(
        code=ErrorCode.SYSTEM_POLICY_IMMUTABLE,
        message=PermissionPolicyError.SYSTEM_POLICY_IMMUTABLE,
        policy_id=policy_id,
    )
