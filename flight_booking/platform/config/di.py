"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from flight_booking.platform.config.core_setting import Settings
from flight_booking.platform.database.orm_db_setting import Database
from flight_booking.service.reservation.app.command.book_itinerary_use_case import (
    BookItineraryUseCase,
)
from flight_booking.service.reservation.app.command.cancel_itinerary_use_case import (
    CancelItineraryUseCase,
)
from flight_booking.service.reservation.app.query.list_reservations_use_case import (
    ListReservationsUseCase,
)
from flight_booking.service.reservation.app.query.log_in_use_case import LogInUseCase
from flight_booking.service.reservation.app.query.search_flights_use_case import (
    SearchFlightsUseCase,
)
from flight_booking.service.reservation.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from flight_booking.service.reservation.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from flight_booking.service.reservation.driven_adapter.repo.reservation_store_impl import (
    SqlAlchemyReservationStore,
)
from flight_booking.service.reservation.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)
from flight_booking.service.reservation.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database handle (opened by setup(), closed by cleanup())
    database = providers.Singleton(
        Database,
        db_url=config_service.provided.DATABASE_URL_ASYNC,
        echo=config_service.provided.DB_ECHO,
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)

    # Reservation store: Factory, one instance (and one transaction) per use-case call
    reservation_store = providers.Factory(
        SqlAlchemyReservationStore,
        session_maker=database.provided.session_maker,
    )

    # Repositories (stateless - use session_factory per-request)
    flight_query_repo = providers.Singleton(
        FlightQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )

    # Command use cases
    book_itinerary_use_case = providers.Singleton(
        BookItineraryUseCase,
        store_factory=reservation_store.provider,
        capacity=config_service.provided.MAX_FLIGHT_BOOKINGS,
        isolation_level=config_service.provided.BOOKING_ISOLATION_LEVEL,
    )
    cancel_itinerary_use_case = providers.Singleton(
        CancelItineraryUseCase,
        store_factory=reservation_store.provider,
        isolation_level=config_service.provided.BOOKING_ISOLATION_LEVEL,
    )

    # Query use cases
    log_in_use_case = providers.Singleton(LogInUseCase, user_query_repo=user_query_repo)
    search_flights_use_case = providers.Singleton(
        SearchFlightsUseCase,
        flight_query_repo=flight_query_repo,
        result_limit=config_service.provided.SEARCH_RESULT_LIMIT,
    )
    list_reservations_use_case = providers.Singleton(
        ListReservationsUseCase, reservation_query_repo=reservation_query_repo
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.database().open()


async def cleanup() -> None:
    await container.database().close()
    container.reset_singletons()
