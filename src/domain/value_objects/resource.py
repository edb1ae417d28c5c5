"""Resource value object (what an action targets).

Resources share the Action segment rule: a policy resource pattern is matched
segment-wise over ``.`` against the concrete resource id. Concrete ids are
usually colon-delimited (``account:123``), which makes them a single segment,
so ``*`` (the default) or an exact id are the common patterns.

A pattern may list alternatives separated by commas; it matches when any
alternative matches:

    Resource.of("account:1, account:2").matches("account:2")  # True

Usage:
    from src.domain.value_objects import Resource

    Resource.all().matches("account:123")  # True
"""

from dataclasses import dataclass

from src.domain.value_objects.pattern import WILDCARD, matches_pattern

ALTERNATIVE_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class Resource:
    """Resource pattern (value object).

    Attributes:
        value: Pattern string; comma-separated alternatives allowed.

    Raises:
        ValueError: If value is blank, has an empty alternative, or contains
            whitespace inside an alternative.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate resource pattern.

        Raises:
            ValueError: If value is blank or malformed.
        """
        if not self.value or not self.value.strip():
            raise ValueError("Resource cannot be blank")

        for pattern in self.patterns:
            if not pattern:
                raise ValueError(f"Invalid resource pattern: {self.value}")
            if any(char.isspace() for char in pattern):
                raise ValueError(f"Invalid resource pattern: {self.value}")
            if any(not segment for segment in pattern.split(".")):
                raise ValueError(f"Invalid resource pattern: {self.value}")

    @classmethod
    def of(cls, value: str) -> "Resource":
        """Create a resource pattern from its string form."""
        return cls(value)

    @classmethod
    def all(cls) -> "Resource":
        """Universal resource pattern (``*``)."""
        return cls(WILDCARD)

    @classmethod
    def of_list(cls, resource_ids: list[str]) -> "Resource":
        """Create a pattern matching any of the given resource ids."""
        return cls(ALTERNATIVE_SEPARATOR.join(resource_ids))

    @property
    def patterns(self) -> list[str]:
        """Individual alternatives, stripped of surrounding whitespace."""
        return [p.strip() for p in self.value.split(ALTERNATIVE_SEPARATOR)]

    @property
    def is_universal(self) -> bool:
        """Whether this pattern matches every resource."""
        return WILDCARD in self.patterns

    def matches(self, resource_id: str) -> bool:
        """Check if this pattern matches a concrete resource id.

        Args:
            resource_id: Concrete resource identifier.

        Returns:
            bool: True if any alternative matches.
        """
        return any(matches_pattern(p, resource_id) for p in self.patterns)

    def __str__(self) -> str:
        """String representation."""
        return self.value
