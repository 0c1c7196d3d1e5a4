from typing import List, Optional

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.movie_entity import Movie


class AddMovieUseCase:
    def __init__(self, *, uow_factory: UnitOfWorkFactory) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(
        self,
        *,
        name: str,
        description: str = '',
        genre: str = '',
        year: Optional[int] = None,
        director: str = '',
        actors: Optional[List[str]] = None,
        trailer_url: str = '',
    ) -> Movie:
        movie = Movie.create(
            name=name,
            description=description,
            genre=genre,
            year=year,
            director=director,
            actors=actors,
            trailer_url=trailer_url,
        )
        async with self.uow_factory() as uow:
            await uow.movie_repo.save_movie(movie=movie)
            await uow.commit()

        Logger.base.info(f'🎞️ [MOVIE] Added {movie.name}')
        return movie
