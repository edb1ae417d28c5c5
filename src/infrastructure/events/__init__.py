"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Event bus with fail-open behavior

Event Handlers:
    - LoggingEventHandler: Structured logging for policy lifecycle events

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> from src.infrastructure.events.handlers import LoggingEventHandler
    >>>
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> logging_handler = LoggingEventHandler(logger=logger)
    >>> event_bus.subscribe(
    ...     PolicyDeletionFailed, logging_handler.handle_policy_deletion_failed
    ... )
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
