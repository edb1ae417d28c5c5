"""Authorization decision value object.

Returned by AuthorizationEngine.check_permission(). A negative decision is a
normal value, never an error.

Reasons:
    - DENY matched:  "action denied by explicit policy"
    - ALLOW matched: "permission granted"
    - nothing:       "no matching policy found" (default-deny)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.domain.enums.policy_effect import PolicyEffect

if TYPE_CHECKING:
    from src.domain.entities.permission_policy import PermissionPolicy

REASON_DENIED = "action denied by explicit policy"
REASON_GRANTED = "permission granted"
REASON_NO_MATCH = "no matching policy found"


@dataclass(frozen=True, slots=True, kw_only=True)
class Decision:
    """Outcome of a permission check.

    Attributes:
        allowed: Whether the action is permitted.
        reason: Human-readable explanation.
        matching_policies: Every policy that matched (both effects), for audit.
        effective_effect: DENY or ALLOW when a policy matched, None otherwise.
    """

    allowed: bool
    reason: str
    matching_policies: tuple[PermissionPolicy, ...] = field(default_factory=tuple)
    effective_effect: PolicyEffect | None = None

    @classmethod
    def from_matches(cls, matching: list[PermissionPolicy]) -> Decision:
        """Resolve matched policies with deny-overrides-allow precedence.

        Args:
            matching: Policies whose action (and resource) matched.

        Returns:
            Decision: DENY if any deny matched, ALLOW if any allow matched,
                otherwise a default-deny decision with no effect.
        """
        if any(p.effect == PolicyEffect.DENY for p in matching):
            return cls(
                allowed=False,
                reason=REASON_DENIED,
                matching_policies=tuple(matching),
                effective_effect=PolicyEffect.DENY,
            )

        if any(p.effect == PolicyEffect.ALLOW for p in matching):
            return cls(
                allowed=True,
                reason=REASON_GRANTED,
                matching_policies=tuple(matching),
                effective_effect=PolicyEffect.ALLOW,
            )

        return cls(allowed=False, reason=REASON_NO_MATCH)

    @property
    def denying_policies(self) -> tuple[PermissionPolicy, ...]:
        """Matched policies with DENY effect."""
        return tuple(p for p in self.matching_policies if p.effect == PolicyEffect.DENY)

    @property
    def allowing_policies(self) -> tuple[PermissionPolicy, ...]:
        """Matched policies with ALLOW effect."""
        return tuple(p for p in self.matching_policies if p.effect == PolicyEffect.ALLOW)
