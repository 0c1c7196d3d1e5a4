"""
Unit tests for the DI container wiring

Building providers never opens the database: the engine is created lazily.
"""

from collections.abc import Iterator

from dependency_injector import providers
import pytest

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.cinema.app.query.list_user_bookings_use_case import ListUserBookingsUseCase
from src.service.cinema.driven_adapter.state.screening_lock_registry_impl import (
    ScreeningLockRegistryImpl,
)


@pytest.fixture
def test_container() -> Iterator[Container]:
    container = Container()
    container.config_service.override(
        providers.Object(
            Settings(
                DATABASE_URL_ASYNC='sqlite+aiosqlite:///:memory:',
                SEAT_COUNT=30,
                SEATS_PER_ROW=6,
                SEAT_PRICE=10,
                CURRENCY_SYMBOL='$',
            )
        )
    )
    yield container
    container.config_service.reset_override()
    container.reset_singletons()


@pytest.mark.unit
class TestContainer:
    def test_use_cases_are_singletons(self, test_container: Container) -> None:
        first = test_container.reserve_seats_use_case()
        assert isinstance(first, ReserveSeatsUseCase)
        assert test_container.reserve_seats_use_case() is first

    def test_command_use_cases_share_one_lock_registry(self, test_container: Container) -> None:
        reserve = test_container.reserve_seats_use_case()
        cancel = test_container.cancel_booking_use_case()
        schedule = test_container.schedule_screening_use_case()
        delete_movie = test_container.delete_movie_use_case()

        assert isinstance(reserve.screening_lock, ScreeningLockRegistryImpl)
        assert (
            reserve.screening_lock
            is cancel.screening_lock
            is schedule.screening_lock
            is delete_movie.screening_lock
        )

    def test_uow_factory_builds_a_fresh_unit_of_work_per_call(
        self, test_container: Container
    ) -> None:
        reserve = test_container.reserve_seats_use_case()

        first, second = reserve.uow_factory(), reserve.uow_factory()

        assert isinstance(first, SqlAlchemyUnitOfWork)
        assert first is not second

    def test_layout_and_price_come_from_settings(self, test_container: Container) -> None:
        layout = test_container.seat_layout()
        history = test_container.list_user_bookings_use_case()

        assert (layout.seat_count, layout.seats_per_row) == (30, 6)
        assert isinstance(history, ListUserBookingsUseCase)
        assert history.seat_price == 10
        assert history.currency_symbol == '$'
