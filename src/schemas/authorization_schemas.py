"""Authorization request and response schemas.

Pydantic schemas for the authorization surface. Includes:
- Request schemas (client → service), with conversion to queries/commands
- Response schemas (service → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.commands.policy_commands import (
    CreatePermissionPolicy,
    UpdatePermissionPolicy,
)
from src.application.dtos.policy_dtos import AuthorizationResult, PolicyResult
from src.application.queries.policy_queries import (
    CheckAuthorization,
    GetEffectivePermissions,
)


# =============================================================================
# Request Schemas
# =============================================================================


class AuthorizationCheckRequest(BaseModel):
    """Request to check a single permission.

    Attributes:
        profile_id: Tenant the request is evaluated in.
        user_id: Requesting user.
        roles: Role names held by the user.
        action: Concrete action.
        resource_id: Concrete resource id (omit to skip resource filtering).
    """

    profile_id: str = Field(..., description="Tenant profile id", min_length=1)
    user_id: str = Field(..., description="Requesting user id", min_length=1)
    roles: list[str] = Field(default_factory=list, description="Role names")
    action: str = Field(
        ..., description="Concrete action", examples=["account.view"]
    )
    resource_id: str | None = Field(
        None, description="Concrete resource id", examples=["account:123"]
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "profile_id": "profile-1",
                "user_id": "u-1",
                "roles": ["READER"],
                "action": "account.view",
                "resource_id": "account:123",
            }
        }
    }

    def to_query(self) -> CheckAuthorization:
        """Convert request body to a CheckAuthorization query."""
        return CheckAuthorization(
            profile_id=self.profile_id,
            user_id=self.user_id,
            roles=tuple(self.roles),
            action=self.action,
            resource_id=self.resource_id,
        )


class EffectivePermissionsRequest(BaseModel):
    """Request to list the policies applying to a user.

    Attributes:
        profile_id: Tenant to evaluate in.
        user_id: User whose permissions are listed.
        roles: Role names held by the user.
    """

    profile_id: str = Field(..., description="Tenant profile id", min_length=1)
    user_id: str = Field(..., description="User id", min_length=1)
    roles: list[str] = Field(default_factory=list, description="Role names")

    def to_query(self) -> GetEffectivePermissions:
        """Convert request body to a GetEffectivePermissions query."""
        return GetEffectivePermissions(
            profile_id=self.profile_id,
            user_id=self.user_id,
            roles=tuple(self.roles),
        )


class CreatePolicyRequest(BaseModel):
    """Request to create a custom policy.

    Pattern syntax is validated by the command handler, which reports the
    offending field in a ValidationError.
    """

    profile_id: str = Field(..., description="Owning profile id", min_length=1)
    subject_urn: str = Field(
        ..., description="Subject URN", examples=["user:u-1", "role:READER"]
    )
    action_pattern: str = Field(
        ..., description="Action pattern", examples=["report.*", "*.create"]
    )
    resource_pattern: str | None = Field(
        None, description="Resource pattern (default '*')", examples=["account:*"]
    )
    effect: str = Field("ALLOW", description="ALLOW or DENY")
    description: str = Field("", description="Human-readable description")

    def to_command(self, created_by: str) -> CreatePermissionPolicy:
        """Convert request body to a CreatePermissionPolicy command.

        Args:
            created_by: Authenticated author id (not taken from the body).
        """
        return CreatePermissionPolicy(
            profile_id=self.profile_id,
            subject_urn=self.subject_urn,
            action_pattern=self.action_pattern,
            resource_pattern=self.resource_pattern,
            effect=self.effect,
            description=self.description,
            created_by=created_by,
        )


class UpdatePolicyRequest(BaseModel):
    """Request to revise a custom policy's description."""

    description: str = Field(..., description="New description")

    def to_command(self, policy_id: str, updated_by: str) -> UpdatePermissionPolicy:
        """Convert request body to an UpdatePermissionPolicy command."""
        return UpdatePermissionPolicy(
            policy_id=policy_id,
            description=self.description,
            updated_by=updated_by,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class AuthorizationCheckResponse(BaseModel):
    """Authorization decision response.

    Attributes:
        allowed: Whether the action is permitted.
        reason: Human-readable explanation.
        effective_effect: "ALLOW", "DENY" or null when nothing matched.
    """

    allowed: bool = Field(..., description="Whether the action is permitted")
    reason: str = Field(
        ..., description="Decision reason", examples=["permission granted"]
    )
    effective_effect: str | None = Field(
        None, description="Winning effect (ALLOW/DENY), null if no match"
    )

    @classmethod
    def from_dto(cls, dto: AuthorizationResult) -> "AuthorizationCheckResponse":
        """Convert application DTO to response schema."""
        return cls(
            allowed=dto.allowed,
            reason=dto.reason,
            effective_effect=dto.effective_effect,
        )


class PolicyResponse(BaseModel):
    """Single permission policy response."""

    id: str = Field(..., description="Policy id")
    profile_id: str | None = Field(None, description="Owning profile (null for system)")
    subject_urn: str = Field(..., description="Subject URN", examples=["role:READER"])
    action_pattern: str = Field(..., description="Action pattern", examples=["*.view"])
    resource_pattern: str = Field(..., description="Resource pattern", examples=["*"])
    effect: str = Field(..., description="ALLOW or DENY")
    description: str = Field(..., description="Human-readable description")
    is_system: bool = Field(..., description="Whether the policy is built in")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last revision timestamp")

    @classmethod
    def from_dto(cls, dto: PolicyResult) -> "PolicyResponse":
        """Convert application DTO to response schema.

        Args:
            dto: PolicyResult from handler.

        Returns:
            PolicyResponse for API response.
        """
        return cls(
            id=dto.id,
            profile_id=dto.profile_id,
            subject_urn=dto.subject_urn,
            action_pattern=dto.action_pattern,
            resource_pattern=dto.resource_pattern,
            effect=dto.effect,
            description=dto.description,
            is_system=dto.is_system,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class PolicyListResponse(BaseModel):
    """Permission policy list response."""

    policies: list[PolicyResponse] = Field(..., description="Policies")
    total_count: int = Field(..., description="Number of policies")

    @classmethod
    def from_dtos(cls, dtos: list[PolicyResult]) -> "PolicyListResponse":
        """Convert a list of DTOs to response schema."""
        return cls(
            policies=[PolicyResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )
