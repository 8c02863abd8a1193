"""
Book Itinerary Use Case - one serializable transaction per call

Flow:
1. Validate the itinerary shape (no store access for malformed input)
2. BEGIN at the configured isolation level
3. Day check for every distinct travel date    -> DAY_FULL on the first hit
4. Capacity check for every leg                -> FLIGHT_FULL on the first full flight
5. Insert one reservation per leg and COMMIT   -> BOOKED

Business rejections roll back and are returned as a ReservationResult. Storage
failures roll back and propagate (StorageError / SerializationConflictError);
nothing here retries.
"""

from datetime import date
from typing import Callable, Sequence

from flight_booking.platform.exception.exceptions import StorageError
from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from flight_booking.service.reservation.app.service.booking_executor import BookingExecutor
from flight_booking.service.reservation.app.service.constraint_checker import ConstraintChecker
from flight_booking.service.reservation.domain.entity.booking_attempt_entity import (
    BookingAttempt,
)
from flight_booking.service.reservation.domain.entity.flight_entity import Flight
from flight_booking.service.reservation.domain.enum import BookingState, ReservationResult
from flight_booking.service.reservation.domain.value_object import Itinerary


class BookItineraryUseCase:
    def __init__(
        self,
        *,
        store_factory: Callable[[], IReservationStore],
        capacity: int,
        isolation_level: str = 'SERIALIZABLE',
    ) -> None:
        self.store_factory = store_factory
        self.capacity = capacity
        self.isolation_level = isolation_level

    @Logger.io
    async def execute(
        self, *, user_id: int, flights: Sequence[Flight], travel_date: date
    ) -> ReservationResult:
        itinerary = Itinerary.of(flights, travel_date=travel_date)
        attempt = BookingAttempt(user_id=user_id, itinerary=itinerary)

        # Fresh store per call: this invocation owns its transaction end to end
        async with self.store_factory() as store:
            try:
                result = await self._run(store=store, attempt=attempt)
            except StorageError:
                attempt.abort()
                raise

        Logger.base.info(
            f'🎫 [BOOK] user={user_id} flights={list(itinerary.flight_ids)} '
            f'date={travel_date.isoformat()} -> {result.value}'
        )
        return result

    async def _run(self, *, store: IReservationStore, attempt: BookingAttempt) -> ReservationResult:
        checker = ConstraintChecker(store=store, capacity=self.capacity)
        executor = BookingExecutor(store=store)
        itinerary = attempt.itinerary

        await store.begin_transaction(isolation_level=self.isolation_level)

        attempt.advance(BookingState.CHECKING_DAY)
        for travel_date in itinerary.travel_dates:
            if not await checker.check_day_available(
                user_id=attempt.user_id, travel_date=travel_date
            ):
                await store.rollback()
                return attempt.reject(ReservationResult.DAY_FULL)

        attempt.advance(BookingState.CHECKING_CAPACITY)
        for flight_id in itinerary.flight_ids:
            if not await checker.check_flight_capacity(flight_id=flight_id):
                await store.rollback()
                return attempt.reject(ReservationResult.FLIGHT_FULL)

        attempt.advance(BookingState.WRITING)
        await executor.insert_reservations(user_id=attempt.user_id, flight_ids=itinerary.flight_ids)
        await store.commit()
        return attempt.commit()
