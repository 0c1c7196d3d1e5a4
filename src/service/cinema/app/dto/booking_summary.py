"""Booking history DTO."""

from datetime import date

import attrs
from uuid_utils import UUID


@attrs.define(frozen=True)
class BookingSummary:
    """
    One line of a user's booking history, ready for display.

    ``formatted_time`` is ``HH:00``, ``formatted_seats`` is ``A1, A2`` and
    ``formatted_price`` is ``£16``.
    """

    booking_id: UUID
    screening_id: UUID
    movie_name: str
    date: date
    formatted_time: str
    formatted_seats: str
    seat_count: int
    total_price: int
    currency_symbol: str = '£'

    @property
    def formatted_price(self) -> str:
        return f'{self.currency_symbol}{self.total_price}'
