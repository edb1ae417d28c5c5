"""Infrastructure layer - Adapters for the authorization ports.

This layer contains implementations of domain protocols (ports):
- authorization/: In-memory PolicyStore and GroupLookup
- persistence/: SQLAlchemy PolicyStore (PermissionPolicyRepository)
- events/: In-memory event bus and logging event handler
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
