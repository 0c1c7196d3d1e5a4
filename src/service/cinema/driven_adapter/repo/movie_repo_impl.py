from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_repo import IMovieRepo
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.driven_adapter.model.movie_model import MovieModel


class MovieRepoImpl(IMovieRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_movie: MovieModel) -> Movie:
        return Movie(
            id=UUID(db_movie.id),
            name=db_movie.name,
            description=db_movie.description,
            genre=db_movie.genre,
            year=db_movie.year,
            director=db_movie.director,
            actors=list(db_movie.actors or []),
            trailer_url=db_movie.trailer_url,
        )

    @Logger.io
    async def load_movie(self, *, movie_id: UUID) -> Optional[Movie]:
        db_movie = await self.session.get(MovieModel, str(movie_id))
        return self._to_entity(db_movie) if db_movie else None

    @Logger.io
    async def save_movie(self, *, movie: Movie) -> Movie:
        await self.session.merge(
            MovieModel(
                id=str(movie.id),
                name=movie.name,
                description=movie.description,
                genre=movie.genre,
                year=movie.year,
                director=movie.director,
                actors=list(movie.actors),
                trailer_url=movie.trailer_url,
            )
        )
        await self.session.flush()
        return movie

    @Logger.io
    async def load_movies_all(self) -> List[Movie]:
        result = await self.session.execute(select(MovieModel).order_by(MovieModel.name))
        return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def delete_movie(self, *, movie_id: UUID) -> None:
        await self.session.execute(delete(MovieModel).where(MovieModel.id == str(movie_id)))
