"""Effective permission query handlers.

Handlers:
    - GetEffectivePermissionsHandler: Every policy applying to a user
    - GetAllowedActionsHandler: ALLOW action patterns of those policies

Both validate the user id, delegate to AuthorizationEngine and map
collaborator failures to InfrastructureError.
"""

from src.application.dtos.policy_dtos import PolicyResult
from src.application.queries.handlers.check_authorization_handler import (
    invalid_user_id,
    lookup_failed,
)
from src.application.queries.policy_queries import (
    GetAllowedActions,
    GetEffectivePermissions,
)
from src.application.services.authorization_engine import AuthorizationEngine
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success


class GetEffectivePermissionsHandler:
    """Handler for GetEffectivePermissions query."""

    def __init__(self, engine: AuthorizationEngine) -> None:
        self._engine = engine

    async def handle(
        self, query: GetEffectivePermissions
    ) -> Result[list[PolicyResult], DomainError]:
        """Handle GetEffectivePermissions query.

        Returns:
            Success(list[PolicyResult]): System policies first, then custom.
            Failure(ValidationError): Blank user id.
            Failure(InfrastructureError): Policy store or group lookup failed.
        """
        user_error = invalid_user_id(query.user_id)
        if user_error is not None:
            return Failure(error=user_error)

        try:
            policies = await self._engine.get_effective_permissions(
                profile_id=query.profile_id,
                user_id=query.user_id,
                roles=query.roles,
            )
        except Exception as e:
            return Failure(error=lookup_failed(e))

        return Success(value=[PolicyResult.from_entity(p) for p in policies])


class GetAllowedActionsHandler:
    """Handler for GetAllowedActions query."""

    def __init__(self, engine: AuthorizationEngine) -> None:
        self._engine = engine

    async def handle(
        self, query: GetAllowedActions
    ) -> Result[list[str], DomainError]:
        """Handle GetAllowedActions query.

        Returns:
            Success(list[str]): Sorted action patterns of ALLOW policies.
            Failure(ValidationError): Blank user id.
            Failure(InfrastructureError): Policy store or group lookup failed.
        """
        user_error = invalid_user_id(query.user_id)
        if user_error is not None:
            return Failure(error=user_error)

        try:
            actions = await self._engine.get_allowed_actions(
                profile_id=query.profile_id,
                user_id=query.user_id,
                roles=query.roles,
            )
        except Exception as e:
            return Failure(error=lookup_failed(e))

        return Success(value=sorted(actions))
