"""Authorization engine (policy decision point).

Answers "may this user perform this action on this resource within this
profile?" by combining predefined role policies with the profile's custom
policies.

Evaluation:
    1. Subject set = user + each role + each group from GroupLookup
    2. Candidates = system policies of the roles + custom policies of the
       profile targeting any subject
    3. Keep candidates whose action (and resource, if given) match
    4. DENY wins over ALLOW; nothing matched means default-deny

Architecture:
    - Application service (uses domain ports, no infrastructure imports)
    - Stateless: every call re-reads both ports, nothing is cached
    - A negative Decision is a value, collaborator failures are exceptions

Usage:
    engine = AuthorizationEngine(policy_store, group_lookup, logger)

    decision = await engine.check_permission(
        profile_id="profile-1",
        user_id="u-1",
        roles={"READER"},
        action=Action.of("account.view"),
        resource_id="account:123",
    )
    if not decision.allowed:
        ...
"""

from collections.abc import Iterable

from src.domain.entities.permission_policy import PermissionPolicy
from src.domain.enums.policy_effect import PolicyEffect
from src.domain.protocols.group_lookup import GroupLookup
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.policy_store import PolicyStore
from src.domain.roles.registry import policies_for_roles
from src.domain.value_objects.action import Action
from src.domain.value_objects.decision import Decision
from src.domain.value_objects.subject import Subject


class AuthorizationEngine:
    """Policy decision point.

    Dependencies (injected via constructor):
        - PolicyStore: Custom policies of a profile
        - GroupLookup: Group memberships of a user
        - LoggerProtocol: Structured logging of checks and lookup failures

    Thread Safety:
        Holds no mutable state, so concurrent calls need no coordination.
    """

    def __init__(
        self,
        policy_store: PolicyStore,
        group_lookup: GroupLookup,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            policy_store: Custom policy store.
            group_lookup: Group membership lookup.
            logger: Logger for audit and failure logging.
        """
        self._policy_store = policy_store
        self._group_lookup = group_lookup
        self._logger = logger

    async def check_permission(
        self,
        profile_id: str,
        user_id: str,
        roles: Iterable[str],
        action: Action,
        resource_id: str | None = None,
    ) -> Decision:
        """Decide whether a user may perform an action.

        Args:
            profile_id: Tenant the request is evaluated in.
            user_id: Requesting user.
            roles: Role names held by the user (unknown names are ignored
                for system policies but still act as role subjects).
            action: Concrete requested action.
            resource_id: Concrete resource id. None (or "*") skips
                resource filtering.

        Returns:
            Decision: DENY if any matching policy denies, ALLOW if any
                matching policy allows, otherwise default-deny.

        Raises:
            ValueError: If user_id is blank.
            Exception: Whatever PolicyStore or GroupLookup raise. Failures
                are logged and re-raised, never turned into a Decision.
        """
        candidates = await self._gather_candidates(profile_id, user_id, roles)
        matching = [p for p in candidates if p.matches(action, resource_id)]
        decision = Decision.from_matches(matching)

        self._logger.info(
            "authorization_check",
            profile_id=profile_id,
            user_id=user_id,
            action=action.value,
            resource_id=resource_id,
            allowed=decision.allowed,
            effect=decision.effective_effect.value if decision.effective_effect else None,
            matched_policies=len(decision.matching_policies),
        )

        return decision

    async def get_effective_permissions(
        self,
        profile_id: str,
        user_id: str,
        roles: Iterable[str],
    ) -> list[PermissionPolicy]:
        """List every policy that applies to a user, unfiltered.

        System policies of the roles come first, then custom policies from
        the store.

        Raises:
            ValueError: If user_id is blank.
            Exception: Whatever PolicyStore or GroupLookup raise.
        """
        return await self._gather_candidates(profile_id, user_id, roles)

    async def get_allowed_actions(
        self,
        profile_id: str,
        user_id: str,
        roles: Iterable[str],
    ) -> set[str]:
        """Collect the action patterns of every applicable ALLOW policy.

        DENY policies are not subtracted, so a pattern may appear here and
        still be denied by check_permission().

        Returns:
            set[str]: Action patterns (e.g., {"*.view", "security.*"}).
        """
        policies = await self.get_effective_permissions(profile_id, user_id, roles)
        return {p.action.value for p in policies if p.effect == PolicyEffect.ALLOW}

    async def _gather_candidates(
        self,
        profile_id: str,
        user_id: str,
        roles: Iterable[str],
    ) -> list[PermissionPolicy]:
        """Load system and custom policies for the effective subject set."""
        user = Subject.user(user_id)
        role_names = sorted({name for name in roles if name and name.strip()})

        try:
            groups = await self._group_lookup.groups_for_user(user_id)
            custom = await self._policy_store.find_by_profile_and_subjects(
                profile_id, _effective_subjects(user, role_names, groups)
            )
        except Exception as e:
            self._logger.error(
                "authorization_lookup_failed",
                error=e,
                profile_id=profile_id,
                user_id=user_id,
            )
            raise

        return policies_for_roles(role_names) + list(custom)


def _effective_subjects(
    user: Subject,
    role_names: list[str],
    groups: Iterable[str],
) -> list[Subject]:
    """Build the effective subject set (user, roles, groups).

    Blank group ids from the lookup are skipped.
    """
    subjects = [user]
    subjects.extend(Subject.role(name) for name in role_names)
    subjects.extend(
        Subject.group(group_id)
        for group_id in sorted(groups)
        if group_id and group_id.strip()
    )
    return subjects
