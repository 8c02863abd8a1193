from datetime import date
from typing import Iterable, Optional

import attrs

from flight_booking.platform.exception.exceptions import DomainError
from flight_booking.service.reservation.domain.entity.flight_entity import Flight


MAX_LEGS = 2


def _validate_legs(instance: 'Itinerary', attribute: attrs.Attribute, legs: tuple) -> None:
    if not 1 <= len(legs) <= MAX_LEGS:
        raise DomainError(f'An itinerary has 1 to {MAX_LEGS} legs, got {len(legs)}')

    if not all(isinstance(leg, Flight) for leg in legs):
        raise DomainError('Itinerary legs must be flights')

    if len({leg.id for leg in legs}) != len(legs):
        raise DomainError('An itinerary cannot contain the same flight twice')

    if len({leg.departure_date for leg in legs}) != 1:
        raise DomainError('All legs of an itinerary must depart on the same date')

    for inbound, outbound in zip(legs, legs[1:]):
        if inbound.dest_city != outbound.origin_city:
            raise DomainError(
                f'Flight {outbound.id} departs from {outbound.origin_city}, '
                f'not {inbound.dest_city} where flight {inbound.id} lands'
            )


@attrs.define(frozen=True)
class Itinerary:
    """One day's journey: a direct flight or two connecting legs"""

    legs: tuple[Flight, ...] = attrs.field(converter=tuple, validator=_validate_legs)

    @classmethod
    def of(cls, flights: Iterable[Flight], *, travel_date: Optional[date] = None) -> 'Itinerary':
        itinerary = cls(legs=tuple(flights))
        if travel_date is not None and itinerary.travel_date != travel_date:
            raise DomainError(
                f'Itinerary departs on {itinerary.travel_date.isoformat()}, '
                f'not {travel_date.isoformat()}'
            )
        return itinerary

    @property
    def travel_date(self) -> date:
        return self.legs[0].departure_date

    @property
    def travel_dates(self) -> tuple[date, ...]:
        """Distinct departure dates in leg order"""
        return tuple(dict.fromkeys(leg.departure_date for leg in self.legs))

    @property
    def flight_ids(self) -> tuple[int, ...]:
        return tuple(leg.id for leg in self.legs)

    @property
    def total_duration(self) -> int:
        return sum(leg.duration for leg in self.legs)

    @property
    def is_direct(self) -> bool:
        return len(self.legs) == 1

    @property
    def origin_city(self) -> str:
        return self.legs[0].origin_city

    @property
    def dest_city(self) -> str:
        return self.legs[-1].dest_city

    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Ascending total duration, then ascending flight ids"""
        return self.total_duration, self.flight_ids
