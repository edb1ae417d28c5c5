"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (CheckAuthorization, ListPoliciesByProfile).

Each query has a corresponding handler in queries/handlers/. Queries NEVER
change state.
"""

from src.application.queries.policy_queries import (
    CheckAuthorization,
    GetAllowedActions,
    GetEffectivePermissions,
    GetPermissionPolicy,
    ListPoliciesByProfile,
    ListPoliciesBySubject,
)

__all__ = [
    "CheckAuthorization",
    "GetAllowedActions",
    "GetEffectivePermissions",
    "GetPermissionPolicy",
    "ListPoliciesByProfile",
    "ListPoliciesBySubject",
]
