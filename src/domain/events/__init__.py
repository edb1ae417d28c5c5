"""Domain events package.

Events are immutable records of policy lifecycle changes, published through
EventBusProtocol by the policy command handlers.
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.policy_events import (
    PolicyCreationAttempted,
    PolicyCreationFailed,
    PolicyCreationSucceeded,
    PolicyDeletionAttempted,
    PolicyDeletionFailed,
    PolicyDeletionSucceeded,
    PolicyUpdateAttempted,
    PolicyUpdateFailed,
    PolicyUpdateSucceeded,
)

__all__ = [
    "DomainEvent",
    "PolicyCreationAttempted",
    "PolicyCreationFailed",
    "PolicyCreationSucceeded",
    "PolicyDeletionAttempted",
    "PolicyDeletionFailed",
    "PolicyDeletionSucceeded",
    "PolicyUpdateAttempted",
    "PolicyUpdateFailed",
    "PolicyUpdateSucceeded",
]
