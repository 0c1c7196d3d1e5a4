from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

import attrs
from uuid_utils import UUID, uuid7

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.cinema_errors import NoSeatsSelectedError
from src.service.cinema.domain.value_object.seat import Seat


SEAT_CODE_SEPARATOR = ','


def _sorted_unique(seats: Iterable[Seat]) -> Tuple[Seat, ...]:
    unique = {seat: seat for seat in seats}
    return tuple(sorted(unique.values(), key=lambda s: (s.row, s.number)))


@attrs.define
class Booking:
    id: UUID
    screening_id: UUID
    username: str
    seats: Tuple[Seat, ...] = attrs.field(converter=_sorted_unique)
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, screening_id: UUID, username: str, seats: Iterable[Seat]) -> 'Booking':
        if not username or not username.strip():
            raise DomainError('Booking requires a username')

        booked_seats = [attrs.evolve(seat, booked=True) for seat in seats]
        if not booked_seats:
            raise NoSeatsSelectedError()

        return cls(
            id=uuid7(),
            screening_id=screening_id,
            username=username,
            seats=booked_seats,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    def total_price(self, seat_price: int) -> int:
        return self.seat_count * seat_price

    def seat_codes(self) -> str:
        """Persisted form, e.g. ``A8,D10``."""
        return SEAT_CODE_SEPARATOR.join(seat.code for seat in self.seats)

    @staticmethod
    def parse_seat_codes(seat_codes: str) -> list[Seat]:
        return [
            Seat.parse(code, booked=True)
            for code in seat_codes.split(SEAT_CODE_SEPARATOR)
            if code.strip()
        ]

    @property
    def formatted_seat_list(self) -> str:
        return ', '.join(seat.code for seat in self.seats)
