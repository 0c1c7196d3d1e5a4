"""
Schedule Screening Use Case

The cinema has a single room, so a time slot can hold one screening of any
movie. The conflict check and the insert run under the slot lock.
"""

from datetime import date

from opentelemetry import trace
from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock, slot_key
from src.service.cinema.domain.cinema_errors import PastSchedulingAttemptError, SlotConflictError
from src.service.cinema.domain.entity.screening_entity import Screening
from src.service.cinema.domain.value_object.seat import SeatLayout
from src.service.cinema.domain.value_object.show_slot import ShowSlot


UNKNOWN_MOVIE_NAME = 'another movie'


class ScheduleScreeningUseCase:
    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        screening_lock: IScreeningLock,
        clock: IClock,
        layout: SeatLayout,
    ) -> None:
        self.uow_factory = uow_factory
        self.screening_lock = screening_lock
        self.clock = clock
        self.layout = layout
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, movie_id: UUID, date: date, hour: int) -> Screening:
        """
        Raises:
            DomainError: hour outside 0..23
            NotFoundError: unknown movie
            PastSchedulingAttemptError: slot already reached
            SlotConflictError: slot already taken, carries the other movie's name
        """
        slot = ShowSlot(date=date, hour=hour)

        with self.tracer.start_as_current_span(
            'use_case.schedule_screening',
            attributes={'movie.id': str(movie_id), 'screening.slot': str(slot)},
        ):
            async with self.screening_lock.hold(slot_key(slot)):
                async with self.uow_factory() as uow:
                    movie = await uow.movie_repo.load_movie(movie_id=movie_id)
                    if movie is None:
                        raise NotFoundError(f'Movie {movie_id} not found')
                    if slot.is_past(self.clock.now()):
                        raise PastSchedulingAttemptError()

                    screenings = await uow.screening_repo.load_screenings_all()
                    conflict = next((s for s in screenings if s.slot == slot), None)
                    if conflict is not None:
                        other = await uow.movie_repo.load_movie(movie_id=conflict.movie_id)
                        raise SlotConflictError(other.name if other else UNKNOWN_MOVIE_NAME)

                    screening = Screening.create(movie_id=movie.id, slot=slot, layout=self.layout)
                    await uow.screening_repo.save_screening(screening=screening)
                    await uow.commit()

            Logger.base.info(f'🎬 [SCHEDULE] {movie.name} scheduled at {slot}')
            return screening
