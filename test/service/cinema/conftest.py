"""
Cinema use case fixtures

Every use case is built on the same in-memory store, lock registry and
fixed clock, the way the DI container wires the real ones.
"""

from datetime import date

import pytest

from src.service.cinema.app.command.add_movie_use_case import AddMovieUseCase
from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.delete_movie_use_case import DeleteMovieUseCase
from src.service.cinema.app.command.delete_screening_use_case import DeleteScreeningUseCase
from src.service.cinema.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.cinema.app.command.schedule_screening_use_case import (
    ScheduleScreeningUseCase,
)
from src.service.cinema.app.query.audit_seat_ledger_use_case import AuditSeatLedgerUseCase
from src.service.cinema.app.query.export_screening_report_use_case import (
    ExportScreeningReportUseCase,
)
from src.service.cinema.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.app.query.list_upcoming_screenings_use_case import (
    ListUpcomingScreeningsUseCase,
)
from src.service.cinema.app.query.list_user_bookings_use_case import ListUserBookingsUseCase
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.screening_entity import Screening
from src.service.cinema.domain.value_object.seat import SeatLayout
from src.service.cinema.domain.value_object.show_slot import ShowSlot
from src.service.cinema.driven_adapter.export.csv_report_writer import CsvReportWriter
from src.service.cinema.driven_adapter.state.screening_lock_registry_impl import (
    ScreeningLockRegistryImpl,
)
from test.service.cinema.helpers import (
    FixedClock,
    InMemoryCinemaStore,
    InMemoryUnitOfWorkFactory,
)


@pytest.fixture
def store(movie: Movie) -> InMemoryCinemaStore:
    store = InMemoryCinemaStore()
    store.add_movie(movie)
    return store


@pytest.fixture
def uow_factory(store: InMemoryCinemaStore) -> InMemoryUnitOfWorkFactory:
    return InMemoryUnitOfWorkFactory(store)


@pytest.fixture
def screening_lock() -> ScreeningLockRegistryImpl:
    return ScreeningLockRegistryImpl()


@pytest.fixture
def upcoming_screening(
    store: InMemoryCinemaStore, movie: Movie, layout: SeatLayout, tomorrow: date
) -> Screening:
    screening = Screening.create(
        movie_id=movie.id, slot=ShowSlot(date=tomorrow, hour=20), layout=layout
    )
    return store.add_screening(screening)


@pytest.fixture
def reserve_seats(
    uow_factory: InMemoryUnitOfWorkFactory,
    screening_lock: ScreeningLockRegistryImpl,
    clock: FixedClock,
) -> ReserveSeatsUseCase:
    return ReserveSeatsUseCase(uow_factory=uow_factory, screening_lock=screening_lock, clock=clock)


@pytest.fixture
def cancel_booking(
    uow_factory: InMemoryUnitOfWorkFactory,
    screening_lock: ScreeningLockRegistryImpl,
    clock: FixedClock,
) -> CancelBookingUseCase:
    return CancelBookingUseCase(uow_factory=uow_factory, screening_lock=screening_lock, clock=clock)


@pytest.fixture
def schedule_screening(
    uow_factory: InMemoryUnitOfWorkFactory,
    screening_lock: ScreeningLockRegistryImpl,
    clock: FixedClock,
    layout: SeatLayout,
) -> ScheduleScreeningUseCase:
    return ScheduleScreeningUseCase(
        uow_factory=uow_factory, screening_lock=screening_lock, clock=clock, layout=layout
    )


@pytest.fixture
def delete_screening(
    uow_factory: InMemoryUnitOfWorkFactory, screening_lock: ScreeningLockRegistryImpl
) -> DeleteScreeningUseCase:
    return DeleteScreeningUseCase(uow_factory=uow_factory, screening_lock=screening_lock)


@pytest.fixture
def delete_movie(
    uow_factory: InMemoryUnitOfWorkFactory, screening_lock: ScreeningLockRegistryImpl
) -> DeleteMovieUseCase:
    return DeleteMovieUseCase(uow_factory=uow_factory, screening_lock=screening_lock)


@pytest.fixture
def add_movie(uow_factory: InMemoryUnitOfWorkFactory) -> AddMovieUseCase:
    return AddMovieUseCase(uow_factory=uow_factory)


@pytest.fixture
def list_upcoming(
    uow_factory: InMemoryUnitOfWorkFactory, clock: FixedClock
) -> ListUpcomingScreeningsUseCase:
    return ListUpcomingScreeningsUseCase(uow_factory=uow_factory, clock=clock)


@pytest.fixture
def get_seat_map(uow_factory: InMemoryUnitOfWorkFactory) -> GetSeatMapUseCase:
    return GetSeatMapUseCase(uow_factory=uow_factory)


@pytest.fixture
def list_movies(uow_factory: InMemoryUnitOfWorkFactory) -> ListMoviesUseCase:
    return ListMoviesUseCase(uow_factory=uow_factory)


@pytest.fixture
def list_user_bookings(uow_factory: InMemoryUnitOfWorkFactory) -> ListUserBookingsUseCase:
    return ListUserBookingsUseCase(uow_factory=uow_factory, seat_price=8, currency_symbol='€')


@pytest.fixture
def export_report(
    uow_factory: InMemoryUnitOfWorkFactory, clock: FixedClock, tmp_path
) -> ExportScreeningReportUseCase:
    return ExportScreeningReportUseCase(
        uow_factory=uow_factory,
        clock=clock,
        report_writer=CsvReportWriter(export_dir=tmp_path),
    )


@pytest.fixture
def audit_ledger(uow_factory: InMemoryUnitOfWorkFactory) -> AuditSeatLedgerUseCase:
    return AuditSeatLedgerUseCase(uow_factory=uow_factory)
