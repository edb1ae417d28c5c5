"""Request/response schemas for the authorization surface.

Pydantic models for request validation and response serialization.
Schemas are kept separate from domain entities and application DTOs.

Usage:
    from src.schemas import AuthorizationCheckRequest, AuthorizationCheckResponse
"""

from src.schemas.authorization_schemas import (
    AuthorizationCheckRequest,
    AuthorizationCheckResponse,
    CreatePolicyRequest,
    EffectivePermissionsRequest,
    PolicyListResponse,
    PolicyResponse,
    UpdatePolicyRequest,
)

__all__ = [
    "AuthorizationCheckRequest",
    "AuthorizationCheckResponse",
    "CreatePolicyRequest",
    "EffectivePermissionsRequest",
    "PolicyListResponse",
    "PolicyResponse",
    "UpdatePolicyRequest",
]
