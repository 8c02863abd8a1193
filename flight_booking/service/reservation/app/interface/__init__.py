from flight_booking.service.reservation.app.interface.i_flight_query_repo import IFlightQueryRepo
from flight_booking.service.reservation.app.interface.i_password_hasher import IPasswordHasher
from flight_booking.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from flight_booking.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from flight_booking.service.reservation.app.interface.i_user_query_repo import IUserQueryRepo


__all__ = [
    'IFlightQueryRepo',
    'IPasswordHasher',
    'IReservationQueryRepo',
    'IReservationStore',
    'IUserQueryRepo',
]
