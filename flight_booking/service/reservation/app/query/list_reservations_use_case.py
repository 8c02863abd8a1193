from typing import List

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from flight_booking.service.reservation.domain.entity.flight_entity import Flight


class ListReservationsUseCase:
    def __init__(self, reservation_query_repo: IReservationQueryRepo):
        self.reservation_query_repo = reservation_query_repo

    @Logger.io
    async def execute(self, *, user_id: int) -> List[Flight]:
        return await self.reservation_query_repo.get_reserved_flights(user_id=user_id)
