"""Async engine and unit-of-work sessions.

Repositories live as long as the dispatcher's pipelines, so they keep a
``Database`` and open one session per operation rather than holding a
session of their own.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from studentdesk.infrastructure.persistence.base import BaseModel


class Database:
    """Owns the engine and hands out transactional sessions.

    Example:
        >>> database = Database("sqlite+aiosqlite:///students.db")
        >>> await database.create_all()
        >>> async with database.session() as session:
        ...     session.add(row)
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: int = 10) -> None:
        engine_options: dict[str, object] = {"echo": echo}
        if database_url.startswith("postgresql"):
            engine_options |= {
                "pool_pre_ping": True,
                "pool_size": pool_size,
                "connect_args": {"command_timeout": 60},
            }

        self.engine: AsyncEngine = create_async_engine(database_url, **engine_options)
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session that commits on success and rolls back on error.

        Yields:
            AsyncSession: Session bound to this database's engine.
        """
        async with self._sessions() as session, session.begin():
            yield session

    async def create_all(self) -> None:
        """Create every mapped table that does not exist yet."""
        # Registers the mapped classes on BaseModel.metadata
        import studentdesk.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()
