"""CheckAuthorization query handler.

Runs the authorization engine for one request and maps the Decision to a DTO.
A denied request is a Success carrying allowed=False; only collaborator
failures and malformed input are Failures.

Architecture:
- Application layer handler (delegates evaluation to AuthorizationEngine)
- Returns Result[DTO, DomainError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from src.application.dtos.policy_dtos import AuthorizationResult
from src.application.queries.policy_queries import CheckAuthorization
from src.application.services.authorization_engine import AuthorizationEngine
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.value_objects.action import Action
from src.domain.value_objects.subject import Subject
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import InfrastructureError


def invalid_user_id(user_id: str) -> ValidationError | None:
    """Return a ValidationError if user_id cannot name a subject, else None."""
    try:
        Subject.user(user_id)
    except ValueError as e:
        return ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=str(e),
            field="user_id",
        )
    return None


def lookup_failed(error: Exception) -> InfrastructureError:
    """Build the error returned when a policy or group lookup raised."""
    return InfrastructureError(
        code=ErrorCode.POLICY_LOOKUP_FAILED,
        message="Authorization lookup failed",
        infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
        details={"error": str(error)},
    )


class CheckAuthorizationHandler:
    """Handler for CheckAuthorization query.

    Dependencies (injected via constructor):
        - AuthorizationEngine: Policy decision point
    """

    def __init__(self, engine: AuthorizationEngine) -> None:
        """Initialize handler with dependencies.

        Args:
            engine: Authorization engine.
        """
        self._engine = engine

    async def handle(
        self, query: CheckAuthorization
    ) -> Result[AuthorizationResult, DomainError]:
        """Handle CheckAuthorization query.

        Args:
            query: CheckAuthorization query.

        Returns:
            Success(AuthorizationResult): Decision (allowed or not).
            Failure(ValidationError): Blank user id or malformed action.
            Failure(InfrastructureError): Policy store or group lookup failed.
        """
        user_error = invalid_user_id(query.user_id)
        if user_error is not None:
            return Failure(error=user_error)

        try:
            action = Action.of(query.action)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=str(e),
                    field="action",
                )
            )

        try:
            decision = await self._engine.check_permission(
                profile_id=query.profile_id,
                user_id=query.user_id,
                roles=query.roles,
                action=action,
                resource_id=query.resource_id,
            )
        except Exception as e:
            return Failure(error=lookup_failed(e))

        return Success(value=AuthorizationResult.from_decision(decision))
