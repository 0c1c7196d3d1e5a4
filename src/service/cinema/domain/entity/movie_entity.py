from typing import List, Optional

import attrs
from uuid_utils import UUID, uuid7

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


@attrs.define
class Movie:
    id: UUID
    name: str
    description: str = ''
    genre: str = ''
    year: Optional[int] = None
    director: str = ''
    actors: List[str] = attrs.field(factory=list)
    trailer_url: str = ''

    def __str__(self) -> str:
        return self.name

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: str,
        description: str = '',
        genre: str = '',
        year: Optional[int] = None,
        director: str = '',
        actors: Optional[List[str]] = None,
        trailer_url: str = '',
    ) -> 'Movie':
        if not name or not name.strip():
            raise DomainError('Movie name cannot be empty')
        if year is not None and year < 1888:
            raise DomainError('Movie year is not plausible')

        return cls(
            id=uuid7(),
            name=name.strip(),
            description=description,
            genre=genre,
            year=year,
            director=director,
            actors=[actor.strip() for actor in actors or [] if actor.strip()],
            trailer_url=trailer_url,
        )
