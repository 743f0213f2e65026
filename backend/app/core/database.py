"""Database connection lifecycle - Async SQLAlchemy.

The process entry point owns a single ``Database`` instance: the lifespan
handler calls ``connect()`` on startup and ``disconnect()`` on shutdown,
and stores it on ``app.state.database`` where ``get_db`` picks it up.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


class DatabaseNotConnectedError(RuntimeError):
    """Raised when a session is requested before connect() or after disconnect()."""


class Database:
    """Owns the async engine and session factory for one database URL."""

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
        connect_timeout: float = 10.0,
        command_timeout: float = 45.0,
        echo: bool = False,
    ):
        self.url = url
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._pool_timeout = pool_timeout
        self._pool_recycle = pool_recycle
        self._connect_timeout = connect_timeout
        self._command_timeout = command_timeout
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def _engine_kwargs(self) -> dict[str, Any]:
        if self.is_sqlite:
            kwargs: dict[str, Any] = {
                "connect_args": {"timeout": self._connect_timeout},
            }
            # In-memory databases live and die with a single connection
            if ":memory:" in self.url or "mode=memory" in self.url:
                kwargs["poolclass"] = StaticPool
            return kwargs

        return {
            "pool_size": self._pool_size,
            "max_overflow": self._max_overflow,
            "pool_timeout": self._pool_timeout,
            "pool_recycle": self._pool_recycle,
            "pool_pre_ping": True,
            # asyncpg: connection establishment and per-statement timeouts
            "connect_args": {
                "timeout": self._connect_timeout,
                "command_timeout": self._command_timeout,
            },
        }

    async def connect(self) -> None:
        """Create the engine and verify the database is reachable.

        Raises whatever the driver raises when the database cannot be
        reached within the connect timeout. No retry is attempted.
        """
        if self._engine is not None:
            return

        engine = create_async_engine(self.url, echo=self._echo, **self._engine_kwargs())
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            await engine.dispose()
            raise

        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database connected")

    def is_connected(self) -> bool:
        return self._engine is not None

    async def disconnect(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("Database disconnected")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotConnectedError("Database is not connected")
        return self._engine

    def session(self) -> AsyncSession:
        """Open a new session. Use as ``async with database.session() as s``."""
        if self._session_maker is None:
            raise DatabaseNotConnectedError("Database is not connected")
        return self._session_maker()

    async def create_all(self) -> None:
        """Create all tables (tests and local development; production uses Alembic)."""
        from app import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        from app import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """Check if the database is reachable."""
        if self._engine is None:
            return False
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (OSError, ConnectionError) as e:
            logger.debug(f"Database connection check failed: {e}")
            return False
        except Exception as e:
            logger.warning(f"Unexpected error checking database connection: {e}")
            return False


def get_database(request: Request) -> Database:
    """Dependency returning the process-wide Database owned by the app."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session."""
    database = get_database(request)
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except BaseException:
            # BaseException so rollback also runs on asyncio.CancelledError
            await session.rollback()
            raise
