"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: event-loop-aware engine + session maker for one database URL
2. Base: declarative base shared by every ORM model
3. Database: the store handle injected into repositories through the DI container

The Database handle is created once per process (DI singleton). The application
lifespan creates tables on startup and disposes the engine on shutdown, so no module
holds a live connection pool at import time.
"""

import asyncio
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


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


def _is_sqlite(url: str) -> bool:
    return url.startswith('sqlite')


class AsyncEngineManager:
    """
    Keeps one engine per running event loop.

    asyncpg/aiosqlite connections are bound to the loop that opened them, so when the
    loop changes (TestClient portal vs. pytest-asyncio loop) the engine is rebuilt.
    """

    def __init__(self, url: str) -> None:
        self._url = url
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is not None and (current_loop is None or self._loop is current_loop):
            return self._engine

        if self._engine is not None:
            Logger.base.warning('🔄 [DB] Event loop changed, rebuilding engine...')
            self._session_maker = None

        Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
        self._engine = self._create_engine()
        self._loop = current_loop
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        if _is_sqlite(self._url):
            engine = create_async_engine(self._url, echo=False, future=True)
            # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
            event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
            return engine

        return create_async_engine(
            self._url,
            echo=False,
            future=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


# =============================================================================
# Database Class (store handle for DI)
# =============================================================================


class Database:
    """Store handle: owns the engine manager and hands out sessions."""

    def __init__(self, *, url: str | None = None) -> None:
        self._engine_manager = AsyncEngineManager(url or settings.DATABASE_URL_ASYNC)

    @property
    def url(self) -> str:
        return self._engine_manager.url

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Note: the session maker context rolls back uncommitted work on exit
        """
        session_maker = self._engine_manager.get_session_maker()
        async with session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """Create database tables if they don't exist"""
        # Import models so they register on Base.metadata
        import src.service.marketplace.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ready')

    async def drop_tables(self) -> None:
        import src.service.marketplace.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine_manager.dispose()
        Logger.base.info('🔌 [DB] Engine disposed')
