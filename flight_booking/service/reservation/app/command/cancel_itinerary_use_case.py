from typing import Callable, Sequence

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from flight_booking.service.reservation.app.service.booking_executor import BookingExecutor
from flight_booking.service.reservation.domain.entity.flight_entity import Flight


class CancelItineraryUseCase:
    """
    Removes the user's reservations on the given flights in one transaction.

    Idempotent: flights the user holds no reservation on are skipped, so
    repeating a cancellation changes nothing.
    """

    def __init__(
        self,
        *,
        store_factory: Callable[[], IReservationStore],
        isolation_level: str = 'SERIALIZABLE',
    ) -> None:
        self.store_factory = store_factory
        self.isolation_level = isolation_level

    @Logger.io
    async def execute(self, *, user_id: int, flights: Sequence[Flight]) -> None:
        flight_ids = list(dict.fromkeys(flight.id for flight in flights))

        async with self.store_factory() as store:
            executor = BookingExecutor(store=store)
            await store.begin_transaction(isolation_level=self.isolation_level)
            deleted = await executor.delete_reservations(user_id=user_id, flight_ids=flight_ids)
            await store.commit()

        Logger.base.info(
            f'🗑️ [CANCEL] user={user_id} flights={flight_ids} removed={deleted}'
        )
