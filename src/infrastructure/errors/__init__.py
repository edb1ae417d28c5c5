"""Infrastructure errors package.

Usage:
    from src.infrastructure.errors import InfrastructureError
"""

from src.infrastructure.errors.infrastructure_error import InfrastructureError

__all__ = ["InfrastructureError"]
