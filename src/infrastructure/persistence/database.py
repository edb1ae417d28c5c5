"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. Repositories receive sessions from here.

Following hexagonal architecture:
- This is an infrastructure concern
- Provides database sessions to repository implementations
- Handles transaction boundaries and connection pooling
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///./gatekeeper.db")
        async with db.get_session() as session:
            repo = PermissionPolicyRepository(session)
            # Automatically commits on success, rolls back on error
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Database connection URL (postgresql+asyncpg://...
                or sqlite+aiosqlite://...).
            echo: If True, log all SQL statements (useful for debugging).
            pool_size: Number of pooled connections (ignored for SQLite).
            max_overflow: Overflow connections above pool_size (ignored for SQLite).
        """
        engine_kwargs: dict[str, Any] = {"echo": echo}

        # SQLite uses a single-connection pool that rejects sizing arguments
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        Commits on successful exit, rolls back on exception, always closes.

        Yields:
            AsyncSession: Database session for operations.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models.

        Used for development and tests; there is no migration tooling.
        """
        from src.infrastructure.persistence.base import BaseModel
        from src.infrastructure.persistence import models  # noqa: F401  (register tables)

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except Exception:
            return False
