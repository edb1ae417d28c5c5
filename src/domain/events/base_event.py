"""Base domain event class.

Domain events represent "things that happened" and are always named in past
tense (PolicyCreationSucceeded, PolicyDeletionFailed).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class PolicyCreationSucceeded(DomainEvent):
    ...     policy_id: str
    >>>
    >>> event = PolicyCreationSucceeded(policy_id="0192...")
    >>> event.event_id      # auto-generated UUID
    >>> event.occurred_at   # auto-generated UTC timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance (UUID v4).
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
