"""Authorization infrastructure package.

In-memory adapters for the authorization ports:
- InMemoryPolicyStore: PolicyStore backed by a dict
- InMemoryGroupLookup: GroupLookup backed by a static membership table

The SQLAlchemy PolicyStore lives in src/infrastructure/persistence.
"""

from src.infrastructure.authorization.in_memory_group_lookup import InMemoryGroupLookup
from src.infrastructure.authorization.in_memory_policy_store import InMemoryPolicyStore

__all__ = [
    "InMemoryGroupLookup",
    "InMemoryPolicyStore",
]
