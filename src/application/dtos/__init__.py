"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers.

Usage:
    from src.application.dtos import AuthorizationResult, PolicyResult

Note:
    DTOs are NOT API schemas (Pydantic models live in src/schemas).
"""

from src.application.dtos.policy_dtos import AuthorizationResult, PolicyResult

__all__ = [
    "AuthorizationResult",
    "PolicyResult",
]
