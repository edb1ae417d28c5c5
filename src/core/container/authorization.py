"""Authorization dependency factories.

Wires the authorization ports (PolicyStore, GroupLookup) to adapters chosen
by settings, and builds the engine and CQRS handlers on top of them.

Store selection (POLICY_STORE_TYPE):
    - 'memory': app-scoped InMemoryPolicyStore singleton
    - 'database': PermissionPolicyRepository bound to a caller-supplied session

Usage:
    async for session in get_db_session():
        store = get_policy_store(session)
        handler = get_check_authorization_handler(store)
        result = await handler.handle(CheckAuthorization(...))
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.create_policy_handler import (
        CreatePolicyHandler,
    )
    from src.application.commands.handlers.delete_policy_handler import (
        DeletePolicyHandler,
    )
    from src.application.commands.handlers.update_policy_handler import (
        UpdatePolicyHandler,
    )
    from src.application.queries.handlers.check_authorization_handler import (
        CheckAuthorizationHandler,
    )
    from src.application.queries.handlers.effective_permissions_handlers import (
        GetAllowedActionsHandler,
        GetEffectivePermissionsHandler,
    )
    from src.application.queries.handlers.policy_query_handlers import (
        GetPermissionPolicyHandler,
        ListPoliciesByProfileHandler,
        ListPoliciesBySubjectHandler,
    )
    from src.application.services.authorization_engine import AuthorizationEngine
    from src.domain.protocols.group_lookup import GroupLookup
    from src.domain.protocols.policy_store import PolicyStore


# ============================================================================
# Ports
# ============================================================================


@lru_cache()
def _get_in_memory_policy_store() -> "PolicyStore":
    from src.infrastructure.authorization.in_memory_policy_store import (
        InMemoryPolicyStore,
    )

    return InMemoryPolicyStore()


def get_policy_store(session: AsyncSession | None = None) -> "PolicyStore":
    """Get the custom policy store for the configured backend.

    Args:
        session: Database session (required when POLICY_STORE_TYPE=database).

    Returns:
        PolicyStore implementation.

    Raises:
        ValueError: Database backend selected but no session supplied.
    """
    if get_settings().policy_store_type == "memory":
        return _get_in_memory_policy_store()

    if session is None:
        raise ValueError("A database session is required for the database policy store")

    from src.infrastructure.persistence.repositories.permission_policy_repository import (
        PermissionPolicyRepository,
    )

    return PermissionPolicyRepository(session=session)


@lru_cache()
def get_group_lookup() -> "GroupLookup":
    """Get group lookup singleton (app-scoped).

    Returns an empty InMemoryGroupLookup; deployments with a directory
    service replace this factory.
    """
    from src.infrastructure.authorization.in_memory_group_lookup import (
        InMemoryGroupLookup,
    )

    return InMemoryGroupLookup()


def get_authorization_engine(
    policy_store: "PolicyStore | None" = None,
) -> "AuthorizationEngine":
    """Build an AuthorizationEngine over the configured ports.

    Args:
        policy_store: Store to evaluate against (defaults to get_policy_store()).
    """
    from src.application.services.authorization_engine import AuthorizationEngine

    return AuthorizationEngine(
        policy_store=policy_store or get_policy_store(),
        group_lookup=get_group_lookup(),
        logger=get_logger(),
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_create_policy_handler(
    policy_store: "PolicyStore | None" = None,
) -> "CreatePolicyHandler":
    """Get CreatePermissionPolicy command handler."""
    from src.application.commands.handlers.create_policy_handler import (
        CreatePolicyHandler,
    )

    return CreatePolicyHandler(
        policy_store=policy_store or get_policy_store(),
        event_bus=get_event_bus(),
    )


def get_update_policy_handler(
    policy_store: "PolicyStore | None" = None,
) -> "UpdatePolicyHandler":
    """Get UpdatePermissionPolicy command handler."""
    from src.application.commands.handlers.update_policy_handler import (
        UpdatePolicyHandler,
    )

    return UpdatePolicyHandler(
        policy_store=policy_store or get_policy_store(),
        event_bus=get_event_bus(),
    )


def get_delete_policy_handler(
    policy_store: "PolicyStore | None" = None,
) -> "DeletePolicyHandler":
    """Get DeletePermissionPolicy command handler."""
    from src.application.commands.handlers.delete_policy_handler import (
        DeletePolicyHandler,
    )

    return DeletePolicyHandler(
        policy_store=policy_store or get_policy_store(),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_check_authorization_handler(
    policy_store: "PolicyStore | None" = None,
) -> "CheckAuthorizationHandler":
    """Get CheckAuthorization query handler."""
    from src.application.queries.handlers.check_authorization_handler import (
        CheckAuthorizationHandler,
    )

    return CheckAuthorizationHandler(engine=get_authorization_engine(policy_store))


def get_effective_permissions_handler(
    policy_store: "PolicyStore | None" = None,
) -> "GetEffectivePermissionsHandler":
    """Get GetEffectivePermissions query handler."""
    from src.application.queries.handlers.effective_permissions_handlers import (
        GetEffectivePermissionsHandler,
    )

    return GetEffectivePermissionsHandler(engine=get_authorization_engine(policy_store))


def get_allowed_actions_handler(
    policy_store: "PolicyStore | None" = None,
) -> "GetAllowedActionsHandler":
    """Get GetAllowedActions query handler."""
    from src.application.queries.handlers.effective_permissions_handlers import (
        GetAllowedActionsHandler,
    )

    return GetAllowedActionsHandler(engine=get_authorization_engine(policy_store))


def get_permission_policy_handler(
    policy_store: "PolicyStore | None" = None,
) -> "GetPermissionPolicyHandler":
    """Get GetPermissionPolicy query handler."""
    from src.application.queries.handlers.policy_query_handlers import (
        GetPermissionPolicyHandler,
    )

    return GetPermissionPolicyHandler(policy_store=policy_store or get_policy_store())


def get_list_policies_by_profile_handler(
    policy_store: "PolicyStore | None" = None,
) -> "ListPoliciesByProfileHandler":
    """Get ListPoliciesByProfile query handler."""
    from src.application.queries.handlers.policy_query_handlers import (
        ListPoliciesByProfileHandler,
    )

    return ListPoliciesByProfileHandler(policy_store=policy_store or get_policy_store())


def get_list_policies_by_subject_handler(
    policy_store: "PolicyStore | None" = None,
) -> "ListPoliciesBySubjectHandler":
    """Get ListPoliciesBySubject query handler."""
    from src.application.queries.handlers.policy_query_handlers import (
        ListPoliciesBySubjectHandler,
    )

    return ListPoliciesBySubjectHandler(policy_store=policy_store or get_policy_store())
