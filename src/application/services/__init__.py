"""Application services."""

from src.application.services.authorization_engine import AuthorizationEngine

__all__ = ["AuthorizationEngine"]
