from typing import List, Optional

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.screening_listing import ScreeningListing
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.domain.enum.screening_order import ScreeningOrder
from src.service.cinema.domain.screening_ordering import sort_screenings


UNKNOWN_MOVIE_NAME = 'Unknown movie'


class ListUpcomingScreeningsUseCase:
    def __init__(self, *, uow_factory: UnitOfWorkFactory, clock: IClock) -> None:
        self.uow_factory = uow_factory
        self.clock = clock

    @Logger.io
    async def execute(
        self,
        *,
        order: ScreeningOrder = ScreeningOrder.START_TIME,
        title_query: Optional[str] = None,
    ) -> List[ScreeningListing]:
        """
        Screenings that have not started yet, reloaded on every call.

        ``title_query`` keeps only movies whose name contains it, ignoring case.
        """
        async with self.uow_factory() as uow:
            screenings = await uow.screening_repo.load_screenings_all()
            movies = {movie.id: movie for movie in await uow.movie_repo.load_movies_all()}

        now = self.clock.now()
        listings = [
            ScreeningListing(
                screening=screening,
                movie_name=movies[screening.movie_id].name
                if screening.movie_id in movies
                else UNKNOWN_MOVIE_NAME,
            )
            for screening in screenings
            if not screening.is_past(now)
        ]

        if title_query and title_query.strip():
            needle = title_query.strip().casefold()
            listings = [item for item in listings if needle in item.movie_name.casefold()]

        Logger.base.info(f'📋 [LIST_UPCOMING] {len(listings)} screenings, order={order}')
        return sort_screenings(
            listings,
            order=order,
            screening_of=lambda item: item.screening,
            movie_name_of=lambda item: item.movie_name,
        )
