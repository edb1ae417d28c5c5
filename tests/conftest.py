"""Pytest configuration and shared test helpers.

Provides:
1. Factories for domain objects (policies, subjects)
2. Mocked ports (PolicyStore, GroupLookup, EventBus, Logger)
3. Settings cache isolation between tests
"""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.config import get_settings
from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.enums.policy_effect import PolicyEffect
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.group_lookup import GroupLookup
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.value_objects.action import Action
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject

PROFILE_ID = "profile-1"
OTHER_PROFILE_ID = "profile-2"
USER_ID = "u-1"
ADMIN_ID = "admin-1"


# =============================================================================
# Domain Factories
# =============================================================================


def create_policy(
    *,
    subject: Subject | None = None,
    action: str = "report.view",
    resource: str | None = None,
    effect: PolicyEffect = PolicyEffect.ALLOW,
    profile_id: str = PROFILE_ID,
    description: str = "",
    created_by: str = ADMIN_ID,
) -> PermissionPolicy:
    """Helper to create a custom PermissionPolicy for testing.

    Args:
        subject: Policy subject (default: user u-1).
        action: Action pattern.
        resource: Resource pattern (None means "*").
        effect: ALLOW (default) or DENY.
        profile_id: Owning profile.
        description: Human-readable description.
        created_by: Author id.

    Returns:
        New custom policy with a fresh UUIDv7 id.
    """
    return PermissionPolicy.create(
        profile_id=profile_id,
        subject=subject or Subject.user(USER_ID),
        action=Action.of(action),
        resource=Resource.of(resource) if resource is not None else None,
        effect=effect,
        description=description,
        created_by=created_by,
    )


# =============================================================================
# Mocked Ports
# =============================================================================


@pytest.fixture
def mock_policy_store() -> AsyncMock:
    """PolicyStore mock returning no custom policies by default."""
    store = AsyncMock(spec=PolicyStore)
    store.find_by_profile_and_subjects.return_value = []
    store.find_by_profile.return_value = []
    store.find_by_subject.return_value = []
    store.find_by_id.return_value = None
    return store


@pytest.fixture
def mock_group_lookup() -> AsyncMock:
    """GroupLookup mock returning no groups by default."""
    lookup = AsyncMock(spec=GroupLookup)
    lookup.groups_for_user.return_value = set()
    return lookup


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    """EventBusProtocol mock recording published events."""
    return AsyncMock(spec=EventBusProtocol)


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol mock (sync methods)."""
    return MagicMock(spec=LoggerProtocol)


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Clear cached Settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def published_event_types(event_bus: AsyncMock) -> list[type]:
    """Return the types of events published on a mocked event bus, in order."""
    return [type(call.args[0]) for call in event_bus.publish.call_args_list]
