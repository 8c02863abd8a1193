from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from flight_booking.service.reservation.domain.entity.flight_entity import Flight
from flight_booking.service.reservation.driven_adapter.model.carrier_model import CarrierModel
from flight_booking.service.reservation.driven_adapter.model.flight_model import FlightModel
from flight_booking.service.reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)
from flight_booking.service.reservation.driven_adapter.repo.flight_query_repo_impl import (
    to_flight_entity,
)


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_reserved_flights(self, *, user_id: int) -> List[Flight]:
        stmt = (
            select(FlightModel, CarrierModel.name)
            .join(ReservationModel, ReservationModel.flight_id == FlightModel.fid)
            .join(CarrierModel, CarrierModel.cid == FlightModel.carrier_id)
            .where(ReservationModel.cust_id == user_id)
            .order_by(
                FlightModel.year,
                FlightModel.month_id,
                FlightModel.day_of_month,
                FlightModel.fid,
            )
        )

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                to_flight_entity(model, carrier)
                for model, carrier in result.all()
            ]
