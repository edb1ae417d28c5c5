"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. The authorization engine and the
event handlers log through this protocol; the container decides the adapter.

Log Levels:
    - DEBUG: Event publishing
    - INFO: Authorization decisions, policy lifecycle successes
    - WARNING: Policy lifecycle failures, event handler failures
    - ERROR: PolicyStore / GroupLookup unreachable
    - CRITICAL: Unused by the engine; available to callers

Security:
    - Log subject URNs and action names, never tokens or credentials

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("authorization_check", user_id=user_id, allowed=False)

    scoped = logger.bind(profile_id=profile_id)
    scoped.info("policy_created")  # profile_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case, no f-strings).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
