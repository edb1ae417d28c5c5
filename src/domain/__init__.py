"""Domain layer - Pure authorization logic.

This layer contains the permission policy entity, the subject/action/resource
value objects, the predefined role registry, protocols (ports) and domain
events. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: PermissionPolicy (has identity)
- value_objects/: Subject, Action, Resource, Decision (immutable)
- roles/: Predefined role table (system policies)
- protocols/: PolicyStore, GroupLookup, logger and event bus ports
- events/: Policy lifecycle events
"""
