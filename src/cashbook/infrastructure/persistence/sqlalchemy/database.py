"""Database handle: one async engine and its session factory.

The handle is created when the application starts and disposed when it
stops. Nothing in the codebase holds a module-level engine; whoever needs
a session receives it from the handle's owner.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cashbook.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)


class Database:
    """Owns the connection pool for the lifetime of a process."""

    def __init__(self, url: str, echo: bool = False):
        _ensure_sqlite_directory(url)
        self._engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before use
        )
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session; uncommitted work is rolled back on exit."""
        async with self._session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """
        Create all database tables (idempotent).

        Uses SQLAlchemy's create_all() which only creates missing tables.
        Existing tables and their data are never modified or deleted.
        """
        logger.info("Ensuring all database tables exist...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema is up to date")

    async def drop_tables(self) -> None:
        """Drop all database tables (USE WITH CAUTION!)."""
        logger.warning("Dropping all database tables...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.info("Database connections closed")
