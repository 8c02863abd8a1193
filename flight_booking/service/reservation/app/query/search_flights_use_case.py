from datetime import date
from typing import List

from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.app.interface.i_flight_query_repo import IFlightQueryRepo
from flight_booking.service.reservation.domain.value_object import Itinerary


class SearchFlightsUseCase:
    """
    Direct itineraries first, then one-stop itineraries.

    Each group is ordered by total duration, ties broken by flight ids
    (leg 1, then leg 2), and capped at `result_limit` entries.
    """

    def __init__(self, flight_query_repo: IFlightQueryRepo, *, result_limit: int = 99):
        self.flight_query_repo = flight_query_repo
        self.result_limit = result_limit

    @Logger.io
    async def execute(
        self, *, travel_date: date, origin_city: str, dest_city: str
    ) -> List[Itinerary]:
        direct_flights = await self.flight_query_repo.find_direct_flights(
            travel_date=travel_date,
            origin_city=origin_city,
            dest_city=dest_city,
            limit=self.result_limit,
        )
        one_stop_pairs = await self.flight_query_repo.find_one_stop_flights(
            travel_date=travel_date,
            origin_city=origin_city,
            dest_city=dest_city,
            limit=self.result_limit,
        )

        direct = sorted((Itinerary.of([flight]) for flight in direct_flights), key=Itinerary.sort_key)
        one_stop = sorted((Itinerary.of(pair) for pair in one_stop_pairs), key=Itinerary.sort_key)
        return direct[: self.result_limit] + one_stop[: self.result_limit]
