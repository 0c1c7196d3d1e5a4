"""
Delete Movie Use Case - removes a movie with all of its screenings and bookings
"""

from contextlib import AsyncExitStack
from typing import Optional

from opentelemetry import trace
from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock, screening_key
from src.service.cinema.domain.entity.movie_entity import Movie


MAX_ATTEMPTS = 3


class DeleteMovieUseCase:
    """
    Delete Movie Use Case

    Flow:
    1. Find the movie's screenings and take every screening lock, in key order
    2. In one unit of work: reload the screenings, delete each one's bookings,
       then the screenings, then the movie, and commit

    A screening scheduled for the movie between steps 1 and 2 is not covered
    by a lock, so the attempt is dropped and started again.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        screening_lock: IScreeningLock,
    ) -> None:
        self.uow_factory = uow_factory
        self.screening_lock = screening_lock
        self.tracer = trace.get_tracer(__name__)

    async def _screening_ids_of(self, movie_id: UUID) -> set[str]:
        async with self.uow_factory() as uow:
            movie = await uow.movie_repo.load_movie(movie_id=movie_id)
            if movie is None:
                raise NotFoundError(f'Movie {movie_id} not found')
            screenings = await uow.screening_repo.load_screenings_all()
        return {str(s.id) for s in screenings if s.movie_id == movie_id}

    async def _delete_locked(self, movie_id: UUID, locked_ids: set[str]) -> Optional[Movie]:
        """Returns None when the movie gained a screening that is not locked."""
        async with self.uow_factory() as uow:
            movie = await uow.movie_repo.load_movie(movie_id=movie_id)
            if movie is None:
                raise NotFoundError(f'Movie {movie_id} not found')

            screenings = [
                s
                for s in await uow.screening_repo.load_screenings_all()
                if s.movie_id == movie_id
            ]
            if not {str(s.id) for s in screenings} <= locked_ids:
                return None

            booking_count = 0
            for screening in screenings:
                bookings = await uow.booking_repo.load_bookings_by_screening(
                    screening_id=screening.id
                )
                for booking in bookings:
                    await uow.booking_repo.delete_booking(booking_id=booking.id)
                booking_count += len(bookings)
                await uow.screening_repo.delete_screening(screening_id=screening.id)
            await uow.movie_repo.delete_movie(movie_id=movie_id)
            await uow.commit()

        Logger.base.info(
            f'🗑️ [DELETE] Movie {movie.name} deleted with {len(screenings)} screenings '
            f'and {booking_count} bookings'
        )
        return movie

    @Logger.io
    async def execute(self, *, movie_id: UUID) -> Movie:
        """
        Raises:
            NotFoundError: unknown movie
            ConflictError: screenings kept being scheduled for the movie
        """
        with self.tracer.start_as_current_span(
            'use_case.delete_movie',
            attributes={'movie.id': str(movie_id)},
        ):
            for _ in range(MAX_ATTEMPTS):
                screening_ids = await self._screening_ids_of(movie_id)
                async with AsyncExitStack() as stack:
                    for screening_id in sorted(screening_ids):
                        await stack.enter_async_context(
                            self.screening_lock.hold(screening_key(UUID(screening_id)))
                        )
                    movie = await self._delete_locked(movie_id, screening_ids)
                if movie is not None:
                    return movie
                Logger.base.warning(f'⚠️ [DELETE] Movie {movie_id} got a new screening, retrying')

            raise ConflictError(f'Screenings of movie {movie_id} changed while deleting it')
