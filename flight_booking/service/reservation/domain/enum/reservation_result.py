from enum import StrEnum


class ReservationResult(StrEnum):
    """Business outcome of a booking attempt. Rejections are not errors."""

    BOOKED = 'booked'
    FLIGHT_FULL = 'flight_full'  # a leg already holds the maximum number of reservations
    DAY_FULL = 'day_full'  # the user already has a reservation on that travel date
