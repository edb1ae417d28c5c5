"""Authorization queries (CQRS read operations).

Queries represent requests for authorization decisions and policy data. They
are immutable dataclasses with question-like names. Queries NEVER change
state and do NOT emit domain events.

Roles are passed as tuples so queries stay hashable.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CheckAuthorization:
    """May this user perform this action on this resource?

    Attributes:
        profile_id: Tenant the request is evaluated in.
        user_id: Requesting user.
        roles: Role names held by the user.
        action: Concrete action (e.g., "account.view").
        resource_id: Concrete resource id; None skips resource filtering.

    Example:
        >>> query = CheckAuthorization(
        ...     profile_id="profile-1",
        ...     user_id="u-1",
        ...     roles=("READER",),
        ...     action="account.view",
        ...     resource_id="account:123",
        ... )
        >>> result = await handler.handle(query)
    """

    profile_id: str
    user_id: str
    roles: tuple[str, ...] = ()
    action: str
    resource_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetEffectivePermissions:
    """List every policy applying to a user (system first, then custom).

    Attributes:
        profile_id: Tenant to evaluate in.
        user_id: User whose permissions are listed.
        roles: Role names held by the user.
    """

    profile_id: str
    user_id: str
    roles: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class GetAllowedActions:
    """List the action patterns a user is granted by ALLOW policies.

    Attributes:
        profile_id: Tenant to evaluate in.
        user_id: User whose actions are listed.
        roles: Role names held by the user.
    """

    profile_id: str
    user_id: str
    roles: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class GetPermissionPolicy:
    """Get one policy by id (custom or system).

    Attributes:
        policy_id: Policy id (UUIDv7 string or "system:role:<ROLE>:<suffix>").
    """

    policy_id: str


@dataclass(frozen=True, kw_only=True)
class ListPoliciesByProfile:
    """List the custom policies of a profile.

    Attributes:
        profile_id: Profile to list.
    """

    profile_id: str


@dataclass(frozen=True, kw_only=True)
class ListPoliciesBySubject:
    """List the custom policies of one subject within a profile.

    Attributes:
        profile_id: Profile to search.
        subject_urn: Subject URN (e.g., "group:ops").
    """

    profile_id: str
    subject_urn: str
