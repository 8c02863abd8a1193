from datetime import date

import attrs


@attrs.define(frozen=True)
class Flight:
    """Scheduled flight leg. Reference data, never mutated by bookings."""

    id: int = attrs.field(validator=attrs.validators.instance_of(int))
    departure_date: date = attrs.field(validator=attrs.validators.instance_of(date))
    carrier: str
    flight_num: str
    origin_city: str
    dest_city: str
    duration: int  # minutes

    @classmethod
    def from_parts(
        cls,
        *,
        id: int,
        year: int,
        month: int,
        day_of_month: int,
        carrier: str,
        flight_num: str,
        origin_city: str,
        dest_city: str,
        duration: int,
    ) -> 'Flight':
        return cls(
            id=id,
            departure_date=date(year, month, day_of_month),
            carrier=carrier,
            flight_num=flight_num,
            origin_city=origin_city,
            dest_city=dest_city,
            duration=duration,
        )

    @property
    def year(self) -> int:
        return self.departure_date.year

    @property
    def month(self) -> int:
        return self.departure_date.month

    @property
    def day_of_month(self) -> int:
        return self.departure_date.day

    def __str__(self) -> str:
        return (
            f'{self.carrier} {self.flight_num} {self.origin_city} -> {self.dest_city} '
            f'on {self.departure_date.isoformat()} ({self.duration} min, id {self.id})'
        )
