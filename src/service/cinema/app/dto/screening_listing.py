"""Screening listing DTO."""

import attrs

from src.service.cinema.domain.entity.screening_entity import Screening


@attrs.define(frozen=True)
class ScreeningListing:
    """A screening paired with the name of the movie it shows."""

    screening: Screening
    movie_name: str

    @property
    def available_seats(self) -> int:
        return self.screening.available_seats
