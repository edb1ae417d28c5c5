"""Commands - Write operations that change state.

Commands represent intent to change custom permission policies. They are
immutable dataclasses with imperative names (CreatePermissionPolicy).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.policy_commands import (
    CreatePermissionPolicy,
    DeletePermissionPolicy,
    UpdatePermissionPolicy,
)

__all__ = [
    "CreatePermissionPolicy",
    "DeletePermissionPolicy",
    "UpdatePermissionPolicy",
]
