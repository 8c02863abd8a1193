from enum import StrEnum


class BookingState(StrEnum):
    STARTED = 'started'
    CHECKING_DAY = 'checking_day'
    CHECKING_CAPACITY = 'checking_capacity'
    WRITING = 'writing'
    COMMITTED = 'committed'
    ROLLED_BACK = 'rolled_back'


TERMINAL_STATES = frozenset({BookingState.COMMITTED, BookingState.ROLLED_BACK})

# ROLLED_BACK is reachable from every live state because a storage failure can
# abort the transaction at any point
ALLOWED_TRANSITIONS: dict[BookingState, frozenset[BookingState]] = {
    BookingState.STARTED: frozenset({BookingState.CHECKING_DAY, BookingState.ROLLED_BACK}),
    BookingState.CHECKING_DAY: frozenset(
        {BookingState.CHECKING_CAPACITY, BookingState.ROLLED_BACK}
    ),
    BookingState.CHECKING_CAPACITY: frozenset({BookingState.WRITING, BookingState.ROLLED_BACK}),
    BookingState.WRITING: frozenset({BookingState.COMMITTED, BookingState.ROLLED_BACK}),
    BookingState.COMMITTED: frozenset(),
    BookingState.ROLLED_BACK: frozenset(),
}
