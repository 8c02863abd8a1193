"""
Unit tests for SearchFlightsUseCase

Tests:
- Directs listed before one-stop itineraries
- Ordering by total duration with flight-id tie-break
- Per-group result limit
"""

from unittest.mock import AsyncMock

import pytest

from flight_booking.service.reservation.app.query.search_flights_use_case import (
    SearchFlightsUseCase,
)
from test.service.reservation.fixtures import TRAVEL_DATE, make_flight


def _leg_pair(first_id: int, second_id: int, first_duration: int, second_duration: int):
    return (
        make_flight(first_id, dest_city='Chicago IL', duration=first_duration),
        make_flight(second_id, origin_city='Chicago IL', duration=second_duration),
    )


@pytest.fixture
def mock_flight_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_direct_flights = AsyncMock(
        return_value=[
            make_flight(10, duration=300),
            make_flight(5, duration=300),
            make_flight(12, duration=200),
        ]
    )
    repo.find_one_stop_flights = AsyncMock(
        return_value=[
            _leg_pair(20, 31, 100, 60),
            _leg_pair(20, 30, 100, 60),
            _leg_pair(21, 32, 50, 60),
        ]
    )
    return repo


@pytest.mark.unit
class TestSearchFlights:
    @pytest.mark.asyncio
    async def test_directs_first_then_one_stops_each_ordered(
        self, mock_flight_query_repo: AsyncMock
    ) -> None:
        # Arrange
        use_case = SearchFlightsUseCase(mock_flight_query_repo)

        # Act
        itineraries = await use_case.execute(
            travel_date=TRAVEL_DATE, origin_city='Seattle WA', dest_city='Boston MA'
        )

        # Assert
        assert [it.flight_ids for it in itineraries] == [
            (12,),
            (5,),
            (10,),
            (21, 32),
            (20, 30),
            (20, 31),
        ]

    @pytest.mark.asyncio
    async def test_limit_is_passed_to_repo_and_applied_per_group(
        self, mock_flight_query_repo: AsyncMock
    ) -> None:
        # Arrange
        use_case = SearchFlightsUseCase(mock_flight_query_repo, result_limit=2)

        # Act
        itineraries = await use_case.execute(
            travel_date=TRAVEL_DATE, origin_city='Seattle WA', dest_city='Boston MA'
        )

        # Assert
        assert [it.flight_ids for it in itineraries] == [(12,), (5,), (21, 32), (20, 30)]
        mock_flight_query_repo.find_direct_flights.assert_awaited_once_with(
            travel_date=TRAVEL_DATE, origin_city='Seattle WA', dest_city='Boston MA', limit=2
        )

    @pytest.mark.asyncio
    async def test_no_flights(self, mock_flight_query_repo: AsyncMock) -> None:
        mock_flight_query_repo.find_direct_flights.return_value = []
        mock_flight_query_repo.find_one_stop_flights.return_value = []
        use_case = SearchFlightsUseCase(mock_flight_query_repo)

        itineraries = await use_case.execute(
            travel_date=TRAVEL_DATE, origin_city='Seattle WA', dest_city='Boston MA'
        )

        assert itineraries == []
