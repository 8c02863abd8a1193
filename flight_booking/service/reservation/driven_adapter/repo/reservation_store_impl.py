"""
Reservation Store Implementation (SQLAlchemy async)

One store instance wraps at most one AsyncSession-backed transaction. Outside a
transaction every point operation runs in its own short-lived session and commits
immediately (auto-commit).

SQLAlchemy errors never leave this module: serialization failures become
SerializationConflictError, everything else StorageError.
"""

from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncGenerator, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flight_booking.platform.exception.exceptions import (
    SerializationConflictError,
    StorageError,
    TransactionStateError,
)
from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from flight_booking.service.reservation.driven_adapter.model.flight_model import FlightModel
from flight_booking.service.reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)


# PostgreSQL: serialization_failure, deadlock_detected
SERIALIZATION_FAILURE_SQLSTATES = frozenset({'40001', '40P01'})
SQLITE_LOCKED_MESSAGE = 'database is locked'


def is_serialization_failure(error: DBAPIError) -> bool:
    for candidate in (error.orig, getattr(error.orig, '__cause__', None)):
        if candidate is None:
            continue
        sqlstate = getattr(candidate, 'sqlstate', None) or getattr(candidate, 'pgcode', None)
        if sqlstate in SERIALIZATION_FAILURE_SQLSTATES:
            return True
    return SQLITE_LOCKED_MESSAGE in str(error.orig)


class SqlAlchemyReservationStore(IReservationStore):
    def __init__(self, *, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self.session_maker = session_maker
        self._session: Optional[AsyncSession] = None

    @property
    def in_transaction(self) -> bool:
        return self._session is not None

    # ========== Transaction control ==========

    async def begin_transaction(self, *, isolation_level: str = 'SERIALIZABLE') -> None:
        if self._session is not None:
            raise TransactionStateError('A transaction is already active on this store')

        session = self.session_maker()
        async with self._translate_errors('begin'):
            try:
                # Pins a connection and opens the transaction at the requested level
                await session.connection(execution_options={'isolation_level': isolation_level})
            except BaseException:
                await session.close()
                raise

        self._session = session
        Logger.base.debug(f'🔒 [STORE] BEGIN ({isolation_level})')

    async def commit(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return

        try:
            async with self._translate_errors('commit'):
                await session.commit()
        finally:
            await session.close()
        Logger.base.debug('✅ [STORE] COMMIT')

    async def rollback(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return

        try:
            async with self._translate_errors('rollback'):
                await session.rollback()
        finally:
            await session.close()
        Logger.base.debug('↩️ [STORE] ROLLBACK')

    # ========== Point operations ==========

    @Logger.io
    async def count_reservations_on_flight(self, *, flight_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(ReservationModel)
            .where(ReservationModel.flight_id == flight_id)
        )
        async with self._session_scope('count_reservations_on_flight') as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())

    @Logger.io
    async def has_reservation_on_date(self, *, user_id: int, travel_date: date) -> bool:
        stmt = (
            select(ReservationModel.flight_id)
            .join(FlightModel, FlightModel.fid == ReservationModel.flight_id)
            .where(
                ReservationModel.cust_id == user_id,
                FlightModel.year == travel_date.year,
                FlightModel.month_id == travel_date.month,
                FlightModel.day_of_month == travel_date.day,
            )
            .limit(1)
        )
        async with self._session_scope('has_reservation_on_date') as session:
            result = await session.execute(stmt)
            return result.first() is not None

    @Logger.io
    async def insert_reservation(self, *, user_id: int, flight_id: int) -> None:
        stmt = insert(ReservationModel).values(cust_id=user_id, flight_id=flight_id)
        async with self._session_scope('insert_reservation') as session:
            await session.execute(stmt)

    @Logger.io
    async def delete_reservation(self, *, user_id: int, flight_id: int) -> int:
        stmt = delete(ReservationModel).where(
            ReservationModel.cust_id == user_id,
            ReservationModel.flight_id == flight_id,
        )
        async with self._session_scope('delete_reservation') as session:
            result = await session.execute(stmt)
            return result.rowcount or 0

    # ========== Helpers ==========

    @asynccontextmanager
    async def _session_scope(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        async with self._translate_errors(operation):
            if self._session is not None:
                yield self._session
                return

            async with self.session_maker() as session, session.begin():
                yield session

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except DBAPIError as e:
            if is_serialization_failure(e):
                raise SerializationConflictError(
                    f'Serialization conflict during {operation}: {e.orig}'
                ) from e
            raise StorageError(f'Storage failure during {operation}: {e.orig}') from e
        except SQLAlchemyError as e:
            raise StorageError(f'Storage failure during {operation}: {e}') from e
