from abc import ABC, abstractmethod
from typing import List

from flight_booking.service.reservation.domain.entity.flight_entity import Flight


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def get_reserved_flights(self, *, user_id: int) -> List[Flight]:
        """Flights reserved by the user, ordered by departure date then flight id"""
        pass
