"""Action value object (what operation is being authorized).

An action is a dot-segmented string. Policies carry action *patterns*
(``*``, ``security.*``, ``*.create``), requests carry concrete actions
(``service.create``, ``security.admin.manage``).

Grammar:
    segment := "*" | [a-z][a-z0-9_-]*
    action  := segment ("." segment)*

Usage:
    from src.domain.value_objects import Action

    pattern = Action.of("*.create")
    pattern.matches(Action.of("service.create"))      # True
    pattern.matches(Action.of("service.sub.create"))  # False
"""

import re
from dataclasses import dataclass

from src.domain.value_objects.pattern import WILDCARD, matches_pattern, split_segments

_ACTION_PATTERN = re.compile(r"^(\*|[a-z][a-z0-9_-]*)(\.(\*|[a-z][a-z0-9_-]*))*$")


@dataclass(frozen=True, slots=True)
class Action:
    """Action pattern or concrete action (value object).

    Attributes:
        value: Dot-segmented action string.

    Raises:
        ValueError: If value is blank or violates the action grammar.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate action format.

        Raises:
            ValueError: If value is blank or malformed.
        """
        if not self.value or not self.value.strip():
            raise ValueError("Action cannot be blank")
        if not _ACTION_PATTERN.match(self.value):
            raise ValueError(f"Invalid action format: {self.value}")

    @classmethod
    def of(cls, value: str) -> "Action":
        """Create an action from its string form."""
        return cls(value)

    @classmethod
    def all(cls) -> "Action":
        """Universal action pattern (``*``)."""
        return cls(WILDCARD)

    @property
    def segments(self) -> list[str]:
        """Dot-separated segments of the action."""
        return split_segments(self.value)

    @property
    def is_universal(self) -> bool:
        """Whether this is the universal pattern ``*``."""
        return self.value == WILDCARD

    def matches(self, action: "Action") -> bool:
        """Check if this pattern matches a concrete action.

        Args:
            action: Concrete action from the request.

        Returns:
            bool: True if matched (see pattern.matches_pattern).
        """
        return matches_pattern(self.value, action.value)

    def __str__(self) -> str:
        """String representation."""
        return self.value
