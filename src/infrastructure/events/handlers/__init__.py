"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured logging of policy lifecycle events

Handlers are fail-open: the event bus logs and swallows handler failures.
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = ["LoggingEventHandler"]
