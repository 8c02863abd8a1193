"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base shared by every ORM model
2. Database: an explicitly constructed handle with an open/close lifecycle
3. create_db_and_tables: schema bootstrap for a freshly opened database

The handle is passed by reference to repositories and to the reservation store
(see di.py); nothing here keeps a module-level engine.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import AsyncAdaptedQueuePool

from flight_booking.platform.logging.loguru_io import Logger


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# SQLite Transactions
# =============================================================================


def _use_immediate_transactions(engine: AsyncEngine) -> None:
    """
    Make every SQLite transaction take the write lock at BEGIN

    The sqlite3 driver defers BEGIN until the first write, so reads made earlier
    in a transaction would see data another writer is about to change. Emitting
    BEGIN IMMEDIATE ourselves serializes writers for the whole transaction; a
    writer that cannot get the lock within the busy timeout fails with
    "database is locked".
    """

    @event.listens_for(engine.sync_engine, 'connect')
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, 'begin')
    def _begin_immediate(conn):
        conn.exec_driver_sql('BEGIN IMMEDIATE')


# =============================================================================
# Database Handle
# =============================================================================


class Database:
    """
    Database handle with an explicit lifecycle.

    Usage:
        database = Database(db_url=settings.DATABASE_URL_ASYNC)
        database.open()
        async with database.session() as session:
            ...
        await database.close()
    """

    def __init__(self, *, db_url: str, echo: bool = False) -> None:
        self._db_url = db_url
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        """Create the engine and session factory (idempotent)"""
        if self._engine is not None:
            return

        url = make_url(self._db_url)
        backend = url.get_backend_name()
        engine_kwargs: dict = {'echo': self._echo, 'future': True}
        if backend == 'sqlite' and url.database in (None, '', ':memory:'):
            # One connection holds the in-memory database; transactions queue for it
            engine_kwargs.update(poolclass=AsyncAdaptedQueuePool, pool_size=1, max_overflow=0)

        Logger.base.info(f'🔗 [DB] Opening {backend} database')
        self._engine = create_async_engine(url, **engine_kwargs)
        if backend == 'sqlite':
            _use_immediate_transactions(self._engine)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def close(self) -> None:
        """Dispose the engine; the handle can be reopened afterwards"""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        Logger.base.info('🔌 [DB] Database closed')

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError('Database is not open; call open() first')
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self._session_maker is None:
            raise RuntimeError('Database is not open; call open() first')
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for read sessions

        Note: Automatically handles rollback on exception
        """
        async with self.session_maker() as session:
            yield session


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables(database: Database) -> None:
    """Create database tables if they don't exist"""
    # Register models on Base.metadata
    import flight_booking.service.reservation.driven_adapter.model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️ [DB] Tables ready')
