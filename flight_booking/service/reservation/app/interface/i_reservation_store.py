"""
Reservation Store Interface

Transactional repository for Reservation rows. The booking core composes these
point operations into transactions; it never builds queries itself.

Usage:
    async with store:
        await store.begin_transaction(isolation_level='SERIALIZABLE')
        if await store.count_reservations_on_flight(flight_id=fid) < capacity:
            await store.insert_reservation(user_id=uid, flight_id=fid)
        await store.commit()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class IReservationStore(ABC):
    """
    One store instance owns at most one transaction at a time.

    - begin_transaction() refuses to nest
    - commit() / rollback() always return the store to its idle (auto-commit) state
    - rollback() with no active transaction is a no-op
    - leaving the async context rolls back whatever is still open
    """

    async def __aenter__(self) -> IReservationStore:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    @property
    @abstractmethod
    def in_transaction(self) -> bool:
        pass

    @abstractmethod
    async def begin_transaction(self, *, isolation_level: str = 'SERIALIZABLE') -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass

    @abstractmethod
    async def count_reservations_on_flight(self, *, flight_id: int) -> int:
        pass

    @abstractmethod
    async def has_reservation_on_date(self, *, user_id: int, travel_date: date) -> bool:
        """True if the user holds any reservation on a flight departing on travel_date"""
        pass

    @abstractmethod
    async def insert_reservation(self, *, user_id: int, flight_id: int) -> None:
        pass

    @abstractmethod
    async def delete_reservation(self, *, user_id: int, flight_id: int) -> int:
        """Returns the number of rows removed (0 when the reservation did not exist)"""
        pass
