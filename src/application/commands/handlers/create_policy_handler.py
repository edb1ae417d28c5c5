"""CreatePermissionPolicy command handler.

Parses the raw command into value objects, builds a custom policy and stores
it.

Architecture:
- Application layer handler (orchestrates business logic)
- Uses Result types for error handling
- Emits 3-state domain events (Attempted → Succeeded/Failed)
"""

from datetime import UTC, datetime
from typing import cast

from uuid_extensions import uuid7

from src.application.commands.policy_commands import CreatePermissionPolicy
from src.application.dtos.policy_dtos import PolicyResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.enums.policy_effect import PolicyEffect
from src.domain.events.policy_events import (
    PolicyCreationAttempted,
    PolicyCreationFailed,
    PolicyCreationSucceeded,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.value_objects.action import Action
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import InfrastructureError


class CreatePolicyHandler:
    """Handler for CreatePermissionPolicy command.

    Dependencies (injected via constructor):
        - PolicyStore: For persistence
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
        self, cmd: CreatePermissionPolicy
    ) -> Result[PolicyResult, DomainError]:
        """Handle CreatePermissionPolicy command.

        Args:
            cmd: CreatePermissionPolicy command.

        Returns:
            Success(PolicyResult): Policy created and stored.
            Failure(ValidationError): Malformed subject, pattern or effect,
                or missing profile/author.
            Failure(InfrastructureError): Store write failed.

        Side Effects:
            - Publishes PolicyCreationAttempted event (always)
            - Publishes PolicyCreationSucceeded event (on success)
            - Publishes PolicyCreationFailed event (on failure)
            - Saves PermissionPolicy to the store (on success)
        """
        # Step 1: Emit ATTEMPTED event
        await self._event_bus.publish(
            PolicyCreationAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                profile_id=cmd.profile_id,
                subject_urn=cmd.subject_urn,
                action_pattern=cmd.action_pattern,
                effect=cmd.effect,
                requested_by=cmd.created_by,
            )
        )

        # Step 2: Parse and validate input
        parsed = self._build_policy(cmd)
        if isinstance(parsed, Failure):
            await self._emit_failed(cmd, parsed.error.message)
            return cast(Result[PolicyResult, DomainError], parsed)
        policy = parsed.value

        # Step 3: Persist
        try:
            await self._policy_store.save(policy)
        except Exception as e:
            await self._emit_failed(cmd, ErrorCode.POLICY_PERSISTENCE_FAILED.value)
            return Failure(
                error=InfrastructureError(
                    code=ErrorCode.POLICY_PERSISTENCE_FAILED,
                    message="Failed to save permission policy",
                    infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
                    details={"error": str(e)},
                )
            )

        # Step 4: Emit SUCCEEDED event
        await self._event_bus.publish(
            PolicyCreationSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                policy_id=policy.id,
                profile_id=cmd.profile_id,
                subject_urn=policy.subject.to_urn(),
                action_pattern=policy.action.value,
                resource_pattern=policy.resource.value,
                effect=policy.effect.value,
                requested_by=cmd.created_by,
            )
        )

        return Success(value=PolicyResult.from_entity(policy))

    def _build_policy(
        self, cmd: CreatePermissionPolicy
    ) -> Result[PermissionPolicy, ValidationError]:
        """Parse raw command fields into a new custom policy."""
        if not cmd.profile_id or not cmd.profile_id.strip():
            return _invalid("profile_id", "profile_id is required")
        if not cmd.created_by or not cmd.created_by.strip():
            return _invalid("created_by", "created_by is required")

        try:
            subject = Subject.from_urn(cmd.subject_urn)
        except ValueError as e:
            return _invalid("subject_urn", str(e))

        try:
            action = Action.of(cmd.action_pattern)
        except ValueError as e:
            return _invalid("action_pattern", str(e))

        try:
            resource = (
                Resource.of(cmd.resource_pattern)
                if cmd.resource_pattern is not None
                else Resource.all()
            )
        except ValueError as e:
            return _invalid("resource_pattern", str(e))

        try:
            effect = PolicyEffect.parse(cmd.effect)
        except ValueError as e:
            return _invalid("effect", str(e))

        return Success(
            value=PermissionPolicy.create(
                profile_id=cmd.profile_id,
                subject=subject,
                action=action,
                resource=resource,
                effect=effect,
                description=cmd.description,
                created_by=cmd.created_by,
            )
        )

    async def _emit_failed(self, cmd: CreatePermissionPolicy, reason: str) -> None:
        """Emit PolicyCreationFailed event."""
        await self._event_bus.publish(
            PolicyCreationFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                profile_id=cmd.profile_id,
                subject_urn=cmd.subject_urn,
                action_pattern=cmd.action_pattern,
                requested_by=cmd.created_by,
                reason=reason,
            )
        )


def _invalid(field: str, message: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=message,
            field=field,
        )
    )
