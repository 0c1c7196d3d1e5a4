"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
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
from src.service.cinema.domain.value_object.seat import SeatLayout
from src.service.cinema.driven_adapter.clock.system_clock import SystemClock
from src.service.cinema.driven_adapter.export.csv_report_writer import CsvReportWriter
from src.service.cinema.driven_adapter.state.screening_lock_registry_impl import (
    ScreeningLockRegistryImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine created lazily on first session)
    database = providers.Singleton(
        Database,
        url=config_service.provided.DATABASE_URL_ASYNC,
        echo=config_service.provided.DB_ECHO,
    )

    # Unit of Work: a new one per business operation, use cases receive the factory
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_maker=database.provided.session_maker,
    )

    # Cinema room
    seat_layout = providers.Singleton(
        SeatLayout,
        seat_count=config_service.provided.SEAT_COUNT,
        seats_per_row=config_service.provided.SEATS_PER_ROW,
    )

    # Infrastructure services
    clock = providers.Singleton(SystemClock, timezone=config_service.provided.CINEMA_TIMEZONE)
    screening_lock = providers.Singleton(ScreeningLockRegistryImpl)  # Singleton: shared lock table
    report_writer = providers.Singleton(CsvReportWriter)

    # Command use cases (stateless, can be Singleton)
    reserve_seats_use_case = providers.Singleton(
        ReserveSeatsUseCase,
        uow_factory=unit_of_work.provider,
        screening_lock=screening_lock,
        clock=clock,
    )
    cancel_booking_use_case = providers.Singleton(
        CancelBookingUseCase,
        uow_factory=unit_of_work.provider,
        screening_lock=screening_lock,
        clock=clock,
    )
    schedule_screening_use_case = providers.Singleton(
        ScheduleScreeningUseCase,
        uow_factory=unit_of_work.provider,
        screening_lock=screening_lock,
        clock=clock,
        layout=seat_layout,
    )
    delete_screening_use_case = providers.Singleton(
        DeleteScreeningUseCase,
        uow_factory=unit_of_work.provider,
        screening_lock=screening_lock,
    )
    add_movie_use_case = providers.Singleton(AddMovieUseCase, uow_factory=unit_of_work.provider)
    delete_movie_use_case = providers.Singleton(
        DeleteMovieUseCase,
        uow_factory=unit_of_work.provider,
        screening_lock=screening_lock,
    )

    # Query use cases
    list_upcoming_screenings_use_case = providers.Singleton(
        ListUpcomingScreeningsUseCase,
        uow_factory=unit_of_work.provider,
        clock=clock,
    )
    get_seat_map_use_case = providers.Singleton(
        GetSeatMapUseCase, uow_factory=unit_of_work.provider
    )
    list_movies_use_case = providers.Singleton(
        ListMoviesUseCase, uow_factory=unit_of_work.provider
    )
    list_user_bookings_use_case = providers.Singleton(
        ListUserBookingsUseCase,
        uow_factory=unit_of_work.provider,
        seat_price=config_service.provided.SEAT_PRICE,
        currency_symbol=config_service.provided.CURRENCY_SYMBOL,
    )
    export_screening_report_use_case = providers.Singleton(
        ExportScreeningReportUseCase,
        uow_factory=unit_of_work.provider,
        clock=clock,
        report_writer=report_writer,
    )
    audit_seat_ledger_use_case = providers.Singleton(
        AuditSeatLedgerUseCase, uow_factory=unit_of_work.provider
    )


container = Container()
