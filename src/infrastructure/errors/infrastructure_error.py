"""Infrastructure layer error types.

Infrastructure errors represent failures in the collaborators behind the
domain ports (policy database, group directory).

Architecture:
- Application handlers catch port exceptions and map them to InfrastructureError
- Infrastructure errors inherit from DomainError (not Exception)
- Uses InfrastructureErrorCode for internal error tracking
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Infrastructure errors still use domain ErrorCode enum (not InfrastructureErrorCode).
    The InfrastructureErrorCode is for internal infrastructure tracking only.

    Attributes:
        code: Domain ErrorCode (POLICY_LOOKUP_FAILED, POLICY_PERSISTENCE_FAILED).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context (original error text).
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None
