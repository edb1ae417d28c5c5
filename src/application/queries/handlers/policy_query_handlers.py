"""Permission policy read handlers.

Handlers:
    - GetPermissionPolicyHandler: One policy by id (system ids resolved
      from the role registry, everything else from the store)
    - ListPoliciesByProfileHandler: Custom policies of a profile
    - ListPoliciesBySubjectHandler: Custom policies of one subject

Architecture:
- Returns Result[DTO, DomainError]
- NO domain events (queries are side-effect free)
"""

from src.application.dtos.policy_dtos import PolicyResult
from src.application.queries.handlers.check_authorization_handler import lookup_failed
from src.application.queries.policy_queries import (
    GetPermissionPolicy,
    ListPoliciesByProfile,
    ListPoliciesBySubject,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import PermissionPolicyError
from src.domain.protocols.policy_store import PolicyStore
from src.domain.roles.registry import get_system_policy
from src.domain.value_objects.subject import Subject


class GetPermissionPolicyHandler:
    """Handler for GetPermissionPolicy query.

    Dependencies (injected via constructor):
        - PolicyStore: For custom policy retrieval
    """

    def __init__(self, policy_store: PolicyStore) -> None:
        """Initialize handler with dependencies.

        Args:
            policy_store: Custom policy store.
        """
        self._policy_store = policy_store

    async def handle(
        self, query: GetPermissionPolicy
    ) -> Result[PolicyResult, DomainError]:
        """Handle GetPermissionPolicy query.

        Returns:
            Success(PolicyResult): Policy found.
            Failure(NotFoundError): No policy with that id.
            Failure(InfrastructureError): Store lookup failed.
        """
        policy = get_system_policy(query.policy_id)

        if policy is None:
            try:
                policy = await self._policy_store.find_by_id(query.policy_id)
            except Exception as e:
                return Failure(error=lookup_failed(e))

        if policy is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.POLICY_NOT_FOUND,
                    message=PermissionPolicyError.POLICY_NOT_FOUND,
                    resource_type="PermissionPolicy",
                    resource_id=query.policy_id,
                )
            )

        return Success(value=PolicyResult.from_entity(policy))


class ListPoliciesByProfileHandler:
    """Handler for ListPoliciesByProfile query."""

    def __init__(self, policy_store: PolicyStore) -> None:
        self._policy_store = policy_store

    async def handle(
        self, query: ListPoliciesByProfile
    ) -> Result[list[PolicyResult], DomainError]:
        """Handle ListPoliciesByProfile query (empty list if none)."""
        try:
            policies = await self._policy_store.find_by_profile(query.profile_id)
        except Exception as e:
            return Failure(error=lookup_failed(e))

        return Success(value=[PolicyResult.from_entity(p) for p in policies])


class ListPoliciesBySubjectHandler:
    """Handler for ListPoliciesBySubject query."""

    def __init__(self, policy_store: PolicyStore) -> None:
        self._policy_store = policy_store

    async def handle(
        self, query: ListPoliciesBySubject
    ) -> Result[list[PolicyResult], DomainError]:
        """Handle ListPoliciesBySubject query.

        Returns:
            Success(list[PolicyResult]): Custom policies (empty if none).
            Failure(ValidationError): Malformed subject URN.
            Failure(InfrastructureError): Store lookup failed.
        """
        try:
            subject = Subject.from_urn(query.subject_urn)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=str(e),
                    field="subject_urn",
                )
            )

        try:
            policies = await self._policy_store.find_by_subject(
                query.profile_id, subject
            )
        except Exception as e:
            return Failure(error=lookup_failed(e))

        return Success(value=[PolicyResult.from_entity(p) for p in policies])
