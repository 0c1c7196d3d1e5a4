"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base shared by every table model
2. Database: lazily created engine and session maker (one per instance, so
   tests can point a fresh instance at a temporary SQLite file)

The desktop build runs on SQLite through aiosqlite. Writes to one screening
are serialized in-process by the screening lock registry; SQLite's own file
lock covers the rest.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Owns one async engine and its session maker.

    Both are created on first use, so constructing a Database (e.g. inside the
    DI container) never touches the filesystem.
    """

    def __init__(self, *, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        self.url = url or settings.DATABASE_URL_ASYNC
        self._echo = settings.DB_ECHO if echo is None else echo
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            Logger.base.info(f'🔗 [DB] Creating engine for {self.url}')
            self._engine = create_async_engine(self.url, echo=self._echo, future=True)
            if self._engine.dialect.name == 'sqlite':
                event.listen(self._engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Note: Automatically handles rollback on exception
        """
        async with self.session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """Create database tables if they don't exist"""
        # Importing the model package registers every table on Base.metadata
        import src.service.cinema.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('✅ [DB] Tables ready')

    async def drop_tables(self) -> None:
        import src.service.cinema.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        Logger.base.info('🗑️ [DB] Tables dropped')

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
