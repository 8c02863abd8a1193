from typing import List, Optional

import attrs

from flight_booking.platform.exception.exceptions import TransactionStateError
from flight_booking.platform.logging.loguru_io import Logger
from flight_booking.service.reservation.domain.enum import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATES,
    BookingState,
    ReservationResult,
)
from flight_booking.service.reservation.domain.value_object import Itinerary


# A rejection may only leave the check that produced it
_REJECTION_STATES = {
    ReservationResult.DAY_FULL: BookingState.CHECKING_DAY,
    ReservationResult.FLIGHT_FULL: BookingState.CHECKING_CAPACITY,
}


@attrs.define
class BookingAttempt:
    """
    Lifecycle of one booking transaction.

    STARTED -> CHECKING_DAY -> CHECKING_CAPACITY -> WRITING -> COMMITTED
    CHECKING_DAY -> ROLLED_BACK(DAY_FULL)
    CHECKING_CAPACITY -> ROLLED_BACK(FLIGHT_FULL)

    COMMITTED and ROLLED_BACK are terminal; a fatal storage error rolls back
    from any live state without a result.
    """

    user_id: int
    itinerary: Itinerary
    state: BookingState = BookingState.STARTED
    result: Optional[ReservationResult] = None
    history: List[BookingState] = attrs.field(factory=lambda: [BookingState.STARTED])

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, next_state: BookingState) -> None:
        if next_state not in ALLOWED_TRANSITIONS[self.state]:
            raise TransactionStateError(
                f'Illegal booking transition {self.state.value} -> {next_state.value}'
            )
        Logger.base.debug(
            f'[BOOKING] user={self.user_id} flights={list(self.itinerary.flight_ids)} '
            f'{self.state.value} -> {next_state.value}'
        )
        self.state = next_state
        self.history.append(next_state)

    def commit(self) -> ReservationResult:
        self.advance(BookingState.COMMITTED)
        self.result = ReservationResult.BOOKED
        return self.result

    def reject(self, result: ReservationResult) -> ReservationResult:
        expected_state = _REJECTION_STATES.get(result)
        if expected_state is None:
            raise TransactionStateError(f'{result.value} is not a rejection')
        if self.state is not expected_state:
            raise TransactionStateError(
                f'{result.value} cannot be reported while {self.state.value}'
            )
        self.advance(BookingState.ROLLED_BACK)
        self.result = result
        return result

    def abort(self) -> None:
        """Storage failure: roll back without a business result"""
        if not self.is_terminal:
            self.advance(BookingState.ROLLED_BACK)
