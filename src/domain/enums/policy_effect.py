"""Policy effect (ALLOW or DENY).

DENY always takes precedence over ALLOW when both match a request.

Usage:
    from src.domain.enums import PolicyEffect

    effect = PolicyEffect.parse("deny")  # PolicyEffect.DENY
"""

from enum import Enum


class PolicyEffect(str, Enum):
    """Outcome carried by a permission policy.

    String Enum:
        Values are upper-case to match the external wire format.
    """

    ALLOW = "ALLOW"
    """Grant permission for matching requests."""

    DENY = "DENY"
    """Explicitly refuse matching requests (overrides any ALLOW)."""

    @classmethod
    def parse(cls, value: str) -> "PolicyEffect":
        """Parse an effect name case-insensitively.

        Args:
            value: Effect name ("allow", "DENY", ...).

        Returns:
            PolicyEffect: Parsed effect.

        Raises:
            ValueError: If value is not ALLOW or DENY.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid effect: {value}") from None
