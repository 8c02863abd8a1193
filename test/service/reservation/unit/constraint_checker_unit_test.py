"""
Unit tests for ConstraintChecker

Tests:
- Day availability
- Capacity threshold (count < capacity)
- Checks refuse to run outside a transaction
"""

from unittest.mock import AsyncMock

import pytest

from flight_booking.platform.exception.exceptions import TransactionStateError
from flight_booking.service.reservation.app.service.constraint_checker import ConstraintChecker
from test.service.reservation.fixtures import TRAVEL_DATE


@pytest.fixture
def mock_store() -> AsyncMock:
    store = AsyncMock()
    store.in_transaction = True
    store.has_reservation_on_date = AsyncMock(return_value=False)
    store.count_reservations_on_flight = AsyncMock(return_value=0)
    return store


@pytest.mark.unit
class TestCheckDayAvailable:
    @pytest.mark.asyncio
    async def test_available_when_user_has_no_reservation_that_day(
        self, mock_store: AsyncMock
    ) -> None:
        # Arrange
        checker = ConstraintChecker(store=mock_store, capacity=3)

        # Act
        available = await checker.check_day_available(user_id=7, travel_date=TRAVEL_DATE)

        # Assert
        assert available is True
        mock_store.has_reservation_on_date.assert_awaited_once_with(
            user_id=7, travel_date=TRAVEL_DATE
        )

    @pytest.mark.asyncio
    async def test_unavailable_when_user_already_booked_that_day(
        self, mock_store: AsyncMock
    ) -> None:
        mock_store.has_reservation_on_date.return_value = True
        checker = ConstraintChecker(store=mock_store, capacity=3)

        assert await checker.check_day_available(user_id=7, travel_date=TRAVEL_DATE) is False


@pytest.mark.unit
class TestCheckFlightCapacity:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'booked,expected',
        [(0, True), (2, True), (3, False), (4, False)],
    )
    async def test_capacity_threshold(
        self, mock_store: AsyncMock, booked: int, expected: bool
    ) -> None:
        # Arrange
        mock_store.count_reservations_on_flight.return_value = booked
        checker = ConstraintChecker(store=mock_store, capacity=3)

        # Act
        has_room = await checker.check_flight_capacity(flight_id=11)

        # Assert
        assert has_room is expected
        mock_store.count_reservations_on_flight.assert_awaited_once_with(flight_id=11)

    @pytest.mark.asyncio
    async def test_capacity_is_configurable(self, mock_store: AsyncMock) -> None:
        mock_store.count_reservations_on_flight.return_value = 1
        checker = ConstraintChecker(store=mock_store, capacity=1)

        assert await checker.check_flight_capacity(flight_id=11) is False

    def test_capacity_must_be_positive(self, mock_store: AsyncMock) -> None:
        with pytest.raises(ValueError, match='at least 1'):
            ConstraintChecker(store=mock_store, capacity=0)


@pytest.mark.unit
class TestChecksRequireTransaction:
    @pytest.mark.asyncio
    async def test_day_check_outside_transaction(self, mock_store: AsyncMock) -> None:
        mock_store.in_transaction = False
        checker = ConstraintChecker(store=mock_store, capacity=3)

        with pytest.raises(TransactionStateError):
            await checker.check_day_available(user_id=7, travel_date=TRAVEL_DATE)

        mock_store.has_reservation_on_date.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_capacity_check_outside_transaction(self, mock_store: AsyncMock) -> None:
        mock_store.in_transaction = False
        checker = ConstraintChecker(store=mock_store, capacity=3)

        with pytest.raises(TransactionStateError):
            await checker.check_flight_capacity(flight_id=11)

        mock_store.count_reservations_on_flight.assert_not_awaited()
