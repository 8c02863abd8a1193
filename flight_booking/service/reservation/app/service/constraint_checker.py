from datetime import date

from flight_booking.platform.exception.exceptions import TransactionStateError
from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)


class ConstraintChecker:
    """
    Evaluates the two booking invariants against the store's current transaction.

    - Day: a user holds reservations for at most one itinerary per calendar date
    - Capacity: a flight never holds more than `capacity` reservations

    Both checks read through the caller's transaction, so the answer is only
    meaningful at the isolation level that transaction was opened with.
    """

    def __init__(self, *, store: IReservationStore, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f'Flight capacity must be at least 1, got {capacity}')
        self.store = store
        self.capacity = capacity

    @Logger.io
    async def check_day_available(self, *, user_id: int, travel_date: date) -> bool:
        self._require_transaction('check_day_available')
        return not await self.store.has_reservation_on_date(
            user_id=user_id, travel_date=travel_date
        )

    @Logger.io
    async def check_flight_capacity(self, *, flight_id: int) -> bool:
        self._require_transaction('check_flight_capacity')
        booked = await self.store.count_reservations_on_flight(flight_id=flight_id)
        return booked < self.capacity

    def _require_transaction(self, operation: str) -> None:
        if not self.store.in_transaction:
            raise TransactionStateError(f'{operation} requires an active transaction')
