"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- Database errors (DATABASE_*)
- External service errors (EXTERNAL_SERVICE_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes.

    These are internal codes for tracking infrastructure failures.
    They are mapped to domain ErrorCode when flowing to domain layer.
    """

    # Database errors (policy store writes)
    DATABASE_ERROR = "database_error"

    # External service errors (policy store reads, group directory)
    EXTERNAL_SERVICE_UNAVAILABLE = "external_service_unavailable"
