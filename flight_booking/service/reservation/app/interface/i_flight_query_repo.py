from abc import ABC, abstractmethod
from datetime import date
from typing import List, Tuple

from flight_booking.service.reservation.domain.entity.flight_entity import Flight


class IFlightQueryRepo(ABC):
    """Read-only flight lookups; flights with unknown duration are never returned"""

    @abstractmethod
    async def find_direct_flights(
        self, *, travel_date: date, origin_city: str, dest_city: str, limit: int
    ) -> List[Flight]:
        """Direct flights ordered by duration, then flight id"""
        pass

    @abstractmethod
    async def find_one_stop_flights(
        self, *, travel_date: date, origin_city: str, dest_city: str, limit: int
    ) -> List[Tuple[Flight, Flight]]:
        """Connecting pairs ordered by total duration, then leg 1 id, then leg 2 id"""
        pass
