from datetime import date
from typing import AsyncContextManager, Callable, List, Tuple

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_flight_query_repo import IFlightQueryRepo
from flight_booking.service.reservation.domain.entity.flight_entity import Flight
from flight_booking.service.reservation.driven_adapter.model.carrier_model import CarrierModel
from flight_booking.service.reservation.driven_adapter.model.flight_model import FlightModel


def _departs_on(flight, travel_date: date) -> list:
    return [
        flight.year == travel_date.year,
        flight.month_id == travel_date.month,
        flight.day_of_month == travel_date.day,
        flight.actual_time.is_not(None),
    ]


def to_flight_entity(model: FlightModel, carrier_name: str) -> Flight:
    return Flight.from_parts(
        id=model.fid,
        year=model.year,
        month=model.month_id,
        day_of_month=model.day_of_month,
        carrier=carrier_name,
        flight_num=model.flight_num,
        origin_city=model.origin_city,
        dest_city=model.dest_city,
        duration=model.actual_time,
    )


class FlightQueryRepoImpl(IFlightQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def find_direct_flights(
        self, *, travel_date: date, origin_city: str, dest_city: str, limit: int
    ) -> List[Flight]:
        stmt = (
            select(FlightModel, CarrierModel.name)
            .join(CarrierModel, CarrierModel.cid == FlightModel.carrier_id)
            .where(
                *_departs_on(FlightModel, travel_date),
                FlightModel.origin_city == origin_city,
                FlightModel.dest_city == dest_city,
            )
            .order_by(FlightModel.actual_time, FlightModel.fid)
            .limit(limit)
        )

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [to_flight_entity(model, carrier) for model, carrier in result.all()]

    @Logger.io
    async def find_one_stop_flights(
        self, *, travel_date: date, origin_city: str, dest_city: str, limit: int
    ) -> List[Tuple[Flight, Flight]]:
        stmt = self._one_stop_statement(
            travel_date=travel_date, origin_city=origin_city, dest_city=dest_city, limit=limit
        )

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [
                (to_flight_entity(first, carrier1), to_flight_entity(second, carrier2))
                for first, carrier1, second, carrier2 in result.all()
            ]

    @staticmethod
    def _one_stop_statement(
        *, travel_date: date, origin_city: str, dest_city: str, limit: int
    ) -> Select:
        f1 = aliased(FlightModel, name='f1')
        f2 = aliased(FlightModel, name='f2')
        c1 = aliased(CarrierModel, name='c1')
        c2 = aliased(CarrierModel, name='c2')

        return (
            select(f1, c1.name, f2, c2.name)
            .join(c1, c1.cid == f1.carrier_id)
            .join(f2, f1.dest_city == f2.origin_city)
            .join(c2, c2.cid == f2.carrier_id)
            .where(
                *_departs_on(f1, travel_date),
                *_departs_on(f2, travel_date),
                f1.origin_city == origin_city,
                f2.dest_city == dest_city,
                f1.fid != f2.fid,
            )
            .order_by(f1.actual_time + f2.actual_time, f1.fid, f2.fid)
            .limit(limit)
        )
