from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.cinema.domain.entity.movie_entity import Movie


class IMovieRepo(ABC):
    @abstractmethod
    async def load_movie(self, *, movie_id: UUID) -> Optional[Movie]:
        pass

    @abstractmethod
    async def save_movie(self, *, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def load_movies_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def delete_movie(self, *, movie_id: UUID) -> None:
        pass
