"""Unit tests for authorization request/response schemas.

Tests cover:
- Request validation and conversion to queries/commands
- Response construction from application DTOs
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from src.application.commands.policy_commands import (
    CreatePermissionPolicy,
    UpdatePermissionPolicy,
)
from src.application.dtos.policy_dtos import AuthorizationResult, PolicyResult
from src.application.queries.policy_queries import (
    CheckAuthorization,
    GetEffectivePermissions,
)
from src.schemas.authorization_schemas import (
    AuthorizationCheckRequest,
    AuthorizationCheckResponse,
    CreatePolicyRequest,
    EffectivePermissionsRequest,
    PolicyListResponse,
    PolicyResponse,
    UpdatePolicyRequest,
)


def create_policy_result(**overrides) -> PolicyResult:
    fields = {
        "id": "p-1",
        "profile_id": "profile-1",
        "subject_urn": "user:u-1",
        "action_pattern": "sensitive.action",
        "resource_pattern": "*",
        "effect": "DENY",
        "description": "Block sensitive action",
        "is_system": False,
        "created_by": "admin-1",
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
        "updated_at": None,
    }
    fields.update(overrides)
    return PolicyResult(**fields)


@pytest.mark.unit
class TestRequestSchemas:
    """Request validation and conversion."""

    def test_check_request_to_query(self):
        request = AuthorizationCheckRequest(
            profile_id="profile-1",
            user_id="u-1",
            roles=["READER", "CREATOR"],
            action="account.view",
            resource_id="account:123",
        )

        query = request.to_query()

        assert query == CheckAuthorization(
            profile_id="profile-1",
            user_id="u-1",
            roles=("READER", "CREATOR"),
            action="account.view",
            resource_id="account:123",
        )

    def test_check_request_defaults(self):
        request = AuthorizationCheckRequest(profile_id="p", user_id="u", action="a.b")

        assert request.roles == []
        assert request.resource_id is None

    def test_check_request_requires_profile(self):
        with pytest.raises(ValidationError):
            AuthorizationCheckRequest(profile_id="", user_id="u", action="a.b")

    def test_effective_permissions_request_to_query(self):
        request = EffectivePermissionsRequest(profile_id="p", user_id="u", roles=["READER"])

        assert request.to_query() == GetEffectivePermissions(
            profile_id="p", user_id="u", roles=("READER",)
        )

    def test_create_policy_request_to_command(self):
        request = CreatePolicyRequest(
            profile_id="profile-1",
            subject_urn="group:ops",
            action_pattern="report.*",
        )

        command = request.to_command(created_by="admin-1")

        assert isinstance(command, CreatePermissionPolicy)
        assert command.effect == "ALLOW"
        assert command.resource_pattern is None
        assert command.created_by == "admin-1"

    def test_update_policy_request_to_command(self):
        command = UpdatePolicyRequest(description="new").to_command("p-1", "admin-1")

        assert command == UpdatePermissionPolicy(
            policy_id="p-1", description="new", updated_by="admin-1"
        )


@pytest.mark.unit
class TestResponseSchemas:
    """Response construction from DTOs."""

    def test_authorization_response_from_dto(self):
        dto = AuthorizationResult(
            allowed=False,
            reason="no matching policy found",
            effective_effect=None,
        )

        response = AuthorizationCheckResponse.from_dto(dto)

        assert response.allowed is False
        assert response.effective_effect is None
        assert response.model_dump()["reason"] == "no matching policy found"

    def test_policy_response_from_dto(self):
        response = PolicyResponse.from_dto(create_policy_result())

        assert response.id == "p-1"
        assert response.effect == "DENY"
        assert response.is_system is False

    def test_policy_list_response(self):
        dtos = [create_policy_result(id="p-1"), create_policy_result(id="p-2")]

        response = PolicyListResponse.from_dtos(dtos)

        assert response.total_count == 2
        assert [p.id for p in response.policies] == ["p-1", "p-2"]
