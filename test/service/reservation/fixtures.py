"""Builders and seeding helpers shared by the reservation tests"""

from datetime import date
from typing import Iterable, Optional

from sqlalchemy import func, select

from flight_booking.platform.database.orm_db_setting import Database
from flight_booking.service.reservation.domain.entity.flight_entity import Flight
from flight_booking.service.reservation.driven_adapter.model import (
    CarrierModel,
    CustomerModel,
    FlightModel,
    ReservationModel,
)


TRAVEL_DATE = date(2024, 3, 1)
NEXT_DAY = date(2024, 3, 2)

CARRIER_ID = 'AS'
CARRIER_NAME = 'Alaska Airlines Inc.'


def make_flight(
    id: int,
    *,
    origin_city: str = 'Seattle WA',
    dest_city: str = 'Boston MA',
    departure_date: date = TRAVEL_DATE,
    duration: int = 300,
    carrier: str = CARRIER_NAME,
) -> Flight:
    return Flight(
        id=id,
        departure_date=departure_date,
        carrier=carrier,
        flight_num=str(100 + id),
        origin_city=origin_city,
        dest_city=dest_city,
        duration=duration,
    )


async def seed_flights(
    database: Database,
    flights: Iterable[Flight],
    *,
    unknown_duration_ids: Iterable[int] = (),
) -> None:
    """Insert flights (and their carrier); ids in unknown_duration_ids get a NULL actual_time"""
    unknown = set(unknown_duration_ids)
    async with database.session() as session:
        if await session.get(CarrierModel, CARRIER_ID) is None:
            session.add(CarrierModel(cid=CARRIER_ID, name=CARRIER_NAME))
        for flight in flights:
            session.add(
                FlightModel(
                    fid=flight.id,
                    year=flight.year,
                    month_id=flight.month,
                    day_of_month=flight.day_of_month,
                    carrier_id=CARRIER_ID,
                    flight_num=flight.flight_num,
                    origin_city=flight.origin_city,
                    dest_city=flight.dest_city,
                    actual_time=None if flight.id in unknown else flight.duration,
                )
            )
        await session.commit()


async def seed_customer(
    database: Database,
    customer_id: int,
    *,
    handle: Optional[str] = None,
    hashed_password: str = 'not-a-bcrypt-hash',
    fullname: str = '',
) -> None:
    async with database.session() as session:
        session.add(
            CustomerModel(
                customer_id=customer_id,
                handle=handle or f'user{customer_id}',
                fullname=fullname,
                hashed_password=hashed_password,
            )
        )
        await session.commit()


async def seed_reservations(database: Database, *pairs: tuple[int, int]) -> None:
    """pairs: (customer_id, flight_id)"""
    async with database.session() as session:
        for customer_id, flight_id in pairs:
            session.add(ReservationModel(cust_id=customer_id, flight_id=flight_id))
        await session.commit()


async def count_reservations(database: Database, *, flight_id: int) -> int:
    async with database.session() as session:
        result = await session.execute(
            select(func.count())
            .select_from(ReservationModel)
            .where(ReservationModel.flight_id == flight_id)
        )
        return int(result.scalar_one())


async def reserved_flight_ids(database: Database, *, user_id: int) -> list[int]:
    async with database.session() as session:
        result = await session.execute(
            select(ReservationModel.flight_id)
            .where(ReservationModel.cust_id == user_id)
            .order_by(ReservationModel.flight_id)
        )
        return list(result.scalars().all())
