"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import GroupLookup, PolicyStore
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.group_lookup import GroupLookup
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.policy_store import PolicyStore

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "GroupLookup",
    "LoggerProtocol",
    "PolicyStore",
]
