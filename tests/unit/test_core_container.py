"""Unit tests for the dependency container.

Tests cover:
- Logger and event bus singletons
- Registry-driven event wiring (strict and graceful modes)
- Policy store selection by POLICY_STORE_TYPE
- Engine and handler factories
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from src.application.commands.handlers.create_policy_handler import CreatePolicyHandler
from src.application.commands.handlers.delete_policy_handler import DeletePolicyHandler
from src.application.commands.handlers.update_policy_handler import UpdatePolicyHandler
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
from src.core import container
from src.core.container.authorization import _get_in_memory_policy_store
from src.domain.events.registry import EVENT_REGISTRY
from src.infrastructure.authorization import InMemoryGroupLookup, InMemoryPolicyStore
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.persistence.repositories.permission_policy_repository import (
    PermissionPolicyRepository,
)


@pytest.fixture(autouse=True)
def reset_container():
    """Clear container singletons so each test sees fresh settings."""
    caches = (
        container.get_logger,
        container.get_database,
        container.get_event_bus,
        container.get_group_lookup,
        _get_in_memory_policy_store,
    )
    for factory in caches:
        factory.cache_clear()
    yield
    for factory in caches:
        factory.cache_clear()


@pytest.mark.unit
class TestInfrastructureFactories:
    """Logger and database factories."""

    def test_logger_is_singleton(self):
        assert container.get_logger() is container.get_logger()

    def test_database_is_singleton(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite+aiosqlite:///:memory:"}, clear=True):
            assert container.get_database() is container.get_database()


@pytest.mark.unit
class TestEventBusWiring:
    """Registry-driven subscription of LoggingEventHandler."""

    def test_every_registered_event_has_subscriber(self):
        event_bus = container.get_event_bus()

        assert isinstance(event_bus, InMemoryEventBus)
        for meta in EVENT_REGISTRY:
            assert len(event_bus._handlers[meta.event_class]) == 1

    def test_event_bus_is_singleton(self):
        assert container.get_event_bus() is container.get_event_bus()

    def test_strict_mode_raises_on_missing_handler(self):
        stub = MagicMock(spec=[])
        with patch(
            "src.infrastructure.events.handlers.logging_event_handler.LoggingEventHandler",
            return_value=stub,
        ):
            with pytest.raises(RuntimeError, match="Missing required logging handler"):
                container.get_event_bus()

    def test_graceful_mode_skips_missing_handler(self):
        stub = MagicMock(spec=[])
        with (
            patch.dict(os.environ, {"EVENTS_STRICT_MODE": "false"}, clear=True),
            patch(
                "src.infrastructure.events.handlers.logging_event_handler.LoggingEventHandler",
                return_value=stub,
            ),
        ):
            event_bus = container.get_event_bus()

        assert not any(event_bus._handlers.values())


@pytest.mark.unit
class TestPolicyStoreSelection:
    """get_policy_store() backend selection."""

    def test_memory_store_is_singleton(self):
        with patch.dict(os.environ, {"POLICY_STORE_TYPE": "memory"}, clear=True):
            store = container.get_policy_store()

            assert isinstance(store, InMemoryPolicyStore)
            assert container.get_policy_store() is store

    def test_database_store_requires_session(self):
        with patch.dict(os.environ, {"POLICY_STORE_TYPE": "database"}, clear=True):
            with pytest.raises(ValueError):
                container.get_policy_store()

    def test_database_store_wraps_session(self):
        session = MagicMock()
        with patch.dict(os.environ, {"POLICY_STORE_TYPE": "database"}, clear=True):
            store = container.get_policy_store(session)

        assert isinstance(store, PermissionPolicyRepository)

    def test_group_lookup_is_singleton(self):
        lookup = container.get_group_lookup()

        assert isinstance(lookup, InMemoryGroupLookup)
        assert container.get_group_lookup() is lookup


@pytest.mark.unit
class TestHandlerFactories:
    """Engine and CQRS handler factories."""

    def test_authorization_engine(self):
        assert isinstance(container.get_authorization_engine(), AuthorizationEngine)

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (container.get_create_policy_handler, CreatePolicyHandler),
            (container.get_update_policy_handler, UpdatePolicyHandler),
            (container.get_delete_policy_handler, DeletePolicyHandler),
            (container.get_check_authorization_handler, CheckAuthorizationHandler),
            (container.get_effective_permissions_handler, GetEffectivePermissionsHandler),
            (container.get_allowed_actions_handler, GetAllowedActionsHandler),
            (container.get_permission_policy_handler, GetPermissionPolicyHandler),
            (container.get_list_policies_by_profile_handler, ListPoliciesByProfileHandler),
            (container.get_list_policies_by_subject_handler, ListPoliciesBySubjectHandler),
        ],
    )
    def test_handler_factories(self, factory, expected):
        assert isinstance(factory(), expected)

    def test_explicit_store_is_used(self):
        store = InMemoryPolicyStore()

        handler = container.get_permission_policy_handler(store)

        assert handler._policy_store is store
