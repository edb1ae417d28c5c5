"""Event bus protocol (port) for domain events.

Policy command handlers publish lifecycle events through this port. The
evaluation path (AuthorizationEngine) publishes nothing.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (InMemoryEventBus)
    - Container (src/core/container) provides the factory function

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(PolicyCreationSucceeded, handler.handle_policy_creation_succeeded)
    >>> await event_bus.publish(PolicyCreationSucceeded(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Type alias for async event handler functions.

Event handlers accept a single event, return None and are async.
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must not reach the publisher.
        2. **Async support**: All handlers are async.
        3. **Exact type routing**: Handlers registered for an event type only
           receive events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async function called with each published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.

        Notes:
            - No handlers = no-op (not an error)
            - Handler exceptions are logged, never raised
        """
        ...
