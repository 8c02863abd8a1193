"""
Integration tests for cancellation

Scenario E: cancelling a booked connecting itinerary removes both rows, and a
repeated cancellation changes nothing.
"""

import pytest

from flight_booking.platform.config.di import Container
from flight_booking.service.reservation.domain.enum import ReservationResult
from test.service.reservation.fixtures import (
    TRAVEL_DATE,
    count_reservations,
    make_flight,
    reserved_flight_ids,
    seed_customer,
    seed_flights,
    seed_reservations,
)


USER_ID = 1
FIRST_LEG = make_flight(30, dest_city='Chicago IL', duration=200)
SECOND_LEG = make_flight(31, origin_city='Chicago IL', duration=150)


@pytest.fixture
async def booked(container: Container) -> Container:
    database = container.database()
    await seed_flights(database, [FIRST_LEG, SECOND_LEG])
    for customer_id in (USER_ID, 100, 101):
        await seed_customer(database, customer_id)
    await seed_reservations(
        database, (100, FIRST_LEG.id), (100, SECOND_LEG.id), (101, SECOND_LEG.id)
    )

    result = await container.book_itinerary_use_case().execute(
        user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG], travel_date=TRAVEL_DATE
    )
    assert result is ReservationResult.BOOKED
    return container


@pytest.mark.integration
class TestCancelItinerary:
    @pytest.mark.asyncio
    async def test_cancel_removes_both_legs(self, booked: Container) -> None:
        # Act
        await booked.cancel_itinerary_use_case().execute(
            user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG]
        )

        # Assert
        database = booked.database()
        assert await reserved_flight_ids(database, user_id=USER_ID) == []
        assert await count_reservations(database, flight_id=FIRST_LEG.id) == 1
        assert await count_reservations(database, flight_id=SECOND_LEG.id) == 2

    @pytest.mark.asyncio
    async def test_repeated_cancel_is_noop(self, booked: Container) -> None:
        use_case = booked.cancel_itinerary_use_case()

        await use_case.execute(user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG])
        await use_case.execute(user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG])

        database = booked.database()
        assert await count_reservations(database, flight_id=FIRST_LEG.id) == 1
        assert await count_reservations(database, flight_id=SECOND_LEG.id) == 2

    @pytest.mark.asyncio
    async def test_cancel_frees_the_day_and_the_seat(self, booked: Container) -> None:
        await booked.cancel_itinerary_use_case().execute(
            user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG]
        )

        result = await booked.book_itinerary_use_case().execute(
            user_id=USER_ID, flights=[FIRST_LEG, SECOND_LEG], travel_date=TRAVEL_DATE
        )

        assert result is ReservationResult.BOOKED
