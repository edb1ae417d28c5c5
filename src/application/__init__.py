"""Application layer - Use cases and orchestration.

This layer contains the authorization use cases following the CQRS pattern:
- services/: AuthorizationEngine (policy decision point)
- commands/: Create, update and delete custom policies (write operations)
- queries/: Authorization checks and policy listings (read operations)
- dtos/: Result dataclasses returned by handlers

The application layer orchestrates domain logic but contains no business rules.
"""
