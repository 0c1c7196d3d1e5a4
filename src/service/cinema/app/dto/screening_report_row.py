"""Screening report row DTO."""

from datetime import date

import attrs


@attrs.define(frozen=True)
class ScreeningReportRow:
    movie_name: str
    date: date
    hour: int
    total: int
    booked: int
    available: int

    @property
    def formatted_time(self) -> str:
        return f'{self.hour:02d}:00'
