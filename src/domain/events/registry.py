"""Domain Events Registry - Single Source of Truth.

Catalogs every policy lifecycle event with its workflow metadata. Used for:
- Container wiring (automated subscription of LoggingEventHandler)
- Validation tests (every event has a handler method, no drift)

Adding new events:
1. Define event dataclass in policy_events.py
2. Add entry to EVENT_REGISTRY below
3. Run tests - they'll tell you which handler methods are missing
"""

from dataclasses import dataclass
from enum import Enum

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


class WorkflowPhase(Enum):
    """3-state workflow phases for ATTEMPT → OUTCOME pattern."""

    ATTEMPTED = "attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        workflow_name: Name of workflow (e.g., "policy_creation").
        phase: Workflow phase (attempted/succeeded/failed).
        requires_logging: LoggingEventHandler handles this event.
    """

    event_class: type[DomainEvent]
    workflow_name: str
    phase: WorkflowPhase
    requires_logging: bool = True

    @property
    def handler_method_name(self) -> str:
        """Handler method expected on event handlers (handle_<workflow>_<phase>)."""
        return f"handle_{self.workflow_name}_{self.phase.value}"


def _workflow(
    workflow_name: str,
    attempted: type[DomainEvent],
    succeeded: type[DomainEvent],
    failed: type[DomainEvent],
) -> list[EventMetadata]:
    return [
        EventMetadata(
            event_class=event_class,
            workflow_name=workflow_name,
            phase=phase,
        )
        for event_class, phase in (
            (attempted, WorkflowPhase.ATTEMPTED),
            (succeeded, WorkflowPhase.SUCCEEDED),
            (failed, WorkflowPhase.FAILED),
        )
    ]


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    *_workflow(
        "policy_creation",
        PolicyCreationAttempted,
        PolicyCreationSucceeded,
        PolicyCreationFailed,
    ),
    *_workflow(
        "policy_update",
        PolicyUpdateAttempted,
        PolicyUpdateSucceeded,
        PolicyUpdateFailed,
    ),
    *_workflow(
        "policy_deletion",
        PolicyDeletionAttempted,
        PolicyDeletionSucceeded,
        PolicyDeletionFailed,
    ),
]


# ═══════════════════════════════════════════════════════════════
# Computed Views (for validation and introspection)
# ═══════════════════════════════════════════════════════════════


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes."""
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_workflow_events(workflow_name: str) -> dict[WorkflowPhase, type[DomainEvent]]:
    """Get all events for a workflow.

    Args:
        workflow_name: Workflow name (e.g., "policy_update")

    Returns:
        Dict mapping phase to event class.
    """
    return {
        meta.phase: meta.event_class
        for meta in EVENT_REGISTRY
        if meta.workflow_name == workflow_name
    }
