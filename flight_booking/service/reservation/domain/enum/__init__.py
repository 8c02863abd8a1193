from flight_booking.service.reservation.domain.enum.booking_state import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATES,
    BookingState,
)
from flight_booking.service.reservation.domain.enum.reservation_result import ReservationResult


__all__ = [
    'ALLOWED_TRANSITIONS',
    'TERMINAL_STATES',
    'BookingState',
    'ReservationResult',
]
