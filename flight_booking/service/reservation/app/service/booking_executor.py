from typing import Iterable

from flight_booking.platform.exception.exceptions import TransactionStateError
from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)


class BookingExecutor:
    """
    Stages reservation writes inside the caller's transaction.

    Nothing here commits: the rows become visible together when the caller
    commits, or not at all when it rolls back.
    """

    def __init__(self, *, store: IReservationStore) -> None:
        self.store = store

    @Logger.io
    async def insert_reservations(self, *, user_id: int, flight_ids: Iterable[int]) -> int:
        self._require_transaction('insert_reservations')
        inserted = 0
        for flight_id in flight_ids:
            await self.store.insert_reservation(user_id=user_id, flight_id=flight_id)
            inserted += 1
        return inserted

    @Logger.io
    async def delete_reservations(self, *, user_id: int, flight_ids: Iterable[int]) -> int:
        """Missing rows are skipped; returns how many rows were actually removed"""
        self._require_transaction('delete_reservations')
        deleted = 0
        for flight_id in flight_ids:
            deleted += await self.store.delete_reservation(user_id=user_id, flight_id=flight_id)
        return deleted

    def _require_transaction(self, operation: str) -> None:
        if not self.store.in_transaction:
            raise TransactionStateError(f'{operation} called without an active transaction')
