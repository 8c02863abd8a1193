import pytest

from flight_booking.platform.config.di import Container
from test.service.reservation.fixtures import (
    CARRIER_NAME,
    NEXT_DAY,
    make_flight,
    seed_customer,
    seed_flights,
    seed_reservations,
)


USER_ID = 1
TODAY_LATE = make_flight(50)
TODAY_EARLY = make_flight(7)
TOMORROW = make_flight(3, departure_date=NEXT_DAY)


@pytest.fixture
async def seeded(container: Container) -> Container:
    database = container.database()
    await seed_flights(database, [TODAY_LATE, TODAY_EARLY, TOMORROW])
    await seed_customer(database, USER_ID)
    await seed_customer(database, 2)
    await seed_reservations(
        database, (USER_ID, TOMORROW.id), (USER_ID, TODAY_LATE.id), (2, TODAY_EARLY.id)
    )
    return container


@pytest.mark.integration
class TestListReservations:
    @pytest.mark.asyncio
    async def test_ordered_by_date_then_flight_id(self, seeded: Container) -> None:
        flights = await seeded.list_reservations_use_case().execute(user_id=USER_ID)

        assert [flight.id for flight in flights] == [TODAY_LATE.id, TOMORROW.id]
        assert all(flight.carrier == CARRIER_NAME for flight in flights)

    @pytest.mark.asyncio
    async def test_user_without_reservations(self, seeded: Container) -> None:
        assert await seeded.list_reservations_use_case().execute(user_id=99) == []
