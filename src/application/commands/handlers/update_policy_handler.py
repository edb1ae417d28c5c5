"""UpdatePermissionPolicy command handler.

Revises the description of a custom policy. System policies (registry ids or
stored policies flagged is_system) are refused and the store is left
untouched.

Architecture:
- Application layer handler (orchestrates business logic)
- Uses Result types for error handling
- Emits 3-state domain events (Attempted → Succeeded/Failed)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.policy_commands import UpdatePermissionPolicy
from src.application.dtos.policy_dtos import PolicyResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import ImmutablePolicyError, PermissionPolicyError
from src.domain.events.policy_events import (
    PolicyUpdateAttempted,
    PolicyUpdateFailed,
    PolicyUpdateSucceeded,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.roles.registry import get_system_policy
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import InfrastructureError


class UpdatePolicyHandler:
    """Handler for UpdatePermissionPolicy command.

    Dependencies (injected via constructor):
        - PolicyStore: For retrieval and persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        policy_store: PolicyStore,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            policy_store: Custom policy store.
            event_bus: Event bus for publishing domain events.
        """
        self._policy_store = policy_store
        self._event_bus = event_bus

    async def handle(
        self, cmd: UpdatePermissionPolicy
    ) -> Result[PolicyResult, DomainError]:
        """Handle UpdatePermissionPolicy command.

        Args:
            cmd: UpdatePermissionPolicy command.

        Returns:
            Success(PolicyResult): Description revised and stored.
            Failure(ImmutablePolicyError): Target is a system policy.
            Failure(NotFoundError): No policy with that id.
            Failure(InfrastructureError): Store read or write failed.

        Side Effects:
            - Publishes PolicyUpdateAttempted event (always)
            - Publishes PolicyUpdateSucceeded event (on success)
            - Publishes PolicyUpdateFailed event (on failure)
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(
            PolicyUpdateAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=cmd.policy_id,
                requested_by=cmd.updated_by,
            )
        )

        # Step 2: Registry policies never reach the store
        if get_system_policy(cmd.policy_id) is not None:
            return await self._fail(cmd, _immutable(cmd.policy_id))

        try:
            # Step 3: Load
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

            # Step 4: Revise (refuses is_system policies)
            revised = policy.revise_description(cmd.description)
            if isinstance(revised, Failure):
                return await self._fail(cmd, _immutable(cmd.policy_id))

            # Step 5: Persist
            await self._policy_store.save(policy)
        except Exception as e:
            return await self._fail(
                cmd,
                InfrastructureError(
                    code=ErrorCode.POLICY_PERSISTENCE_FAILED,
                    message="Failed to update permission policy",
                    infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
                    details={"error": str(e)},
                ),
            )

        # Step 6: Emit SUCCEEDED event
        await self._event_bus.publish(
            PolicyUpdateSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=policy.id,
                profile_id=policy.profile_id or "",
                requested_by=cmd.updated_by,
            )
        )

        return Success(value=PolicyResult.from_entity(policy))

    async def _fail(
        self, cmd: UpdatePermissionPolicy, error: DomainError
    ) -> Failure[DomainError]:
        """Emit PolicyUpdateFailed event and wrap the error."""
        await self._event_bus.publish(
            PolicyUpdateFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=cmd.policy_id,
                requested_by=cmd.updated_by,
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
