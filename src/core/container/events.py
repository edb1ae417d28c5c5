# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing.
Configures event handler subscriptions at startup using registry-driven
auto-wiring (EVENT_REGISTRY in src/domain/events/registry.py).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    For each event in EVENT_REGISTRY the factory:
        1. Computes the handler method name (handle_<workflow>_<phase>)
        2. Subscribes LoggingEventHandler's method if logging is required

    Mode-dependent behavior:
        - STRICT (events_strict_mode=True): Raise if a handler method is missing
        - GRACEFUL: Skip missing handlers, log a warning

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: Strict mode and a required handler method is missing.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(PolicyCreationSucceeded(...))
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events.registry import EVENT_REGISTRY
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    settings = get_settings()
    logger = get_logger()

    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    for metadata in EVENT_REGISTRY:
        if not metadata.requires_logging:
            continue

        method_name = metadata.handler_method_name
        handler_method = getattr(logging_handler, method_name, None)

        if handler_method is None:
            if settings.events_strict_mode:
                raise RuntimeError(
                    f"Missing required logging handler for "
                    f"{metadata.event_class.__name__}: "
                    f"LoggingEventHandler.{method_name}"
                )
            logger.warning(
                "Missing logging handler (graceful mode)",
                event_class=metadata.event_class.__name__,
                handler_method=method_name,
            )
            continue

        event_bus.subscribe(metadata.event_class, handler_method)

    return event_bus
