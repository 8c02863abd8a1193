"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from flight_booking.service.reservation.driven_adapter.model.carrier_model import CarrierModel
from flight_booking.service.reservation.driven_adapter.model.customer_model import CustomerModel
from flight_booking.service.reservation.driven_adapter.model.flight_model import FlightModel
from flight_booking.service.reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)

__all__ = [
    'CarrierModel',
    'CustomerModel',
    'FlightModel',
    'ReservationModel',
]
