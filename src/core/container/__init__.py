"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_check_authorization_handler

The container is organized into modules:
- infrastructure: Logging, database
- events: Event bus and subscriptions
- authorization: Ports, engine, policy command/query handlers
"""

from src.core.container.authorization import (
    get_allowed_actions_handler,
    get_authorization_engine,
    get_check_authorization_handler,
    get_create_policy_handler,
    get_delete_policy_handler,
    get_effective_permissions_handler,
    get_group_lookup,
    get_list_policies_by_profile_handler,
    get_list_policies_by_subject_handler,
    get_permission_policy_handler,
    get_policy_store,
    get_update_policy_handler,
)
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "get_event_bus",
    # Authorization
    "get_allowed_actions_handler",
    "get_authorization_engine",
    "get_check_authorization_handler",
    "get_create_policy_handler",
    "get_delete_policy_handler",
    "get_effective_permissions_handler",
    "get_group_lookup",
    "get_list_policies_by_profile_handler",
    "get_list_policies_by_subject_handler",
    "get_permission_policy_handler",
    "get_policy_store",
    "get_update_policy_handler",
]
