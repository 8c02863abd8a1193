from flight_booking.service.reservation.domain.value_object.itinerary import MAX_LEGS, Itinerary


__all__ = ['MAX_LEGS', 'Itinerary']
