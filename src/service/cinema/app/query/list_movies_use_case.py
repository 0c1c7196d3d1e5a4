from typing import List

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.movie_entity import Movie


class ListMoviesUseCase:
    def __init__(self, *, uow_factory: UnitOfWorkFactory) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self) -> List[Movie]:
        async with self.uow_factory() as uow:
            movies = await uow.movie_repo.load_movies_all()
        return sorted(movies, key=lambda movie: (movie.name.casefold(), movie.name))
