import re
import string
from typing import Optional

import attrs

from src.service.cinema.domain.cinema_errors import UnknownSeatError


_SEAT_CODE_PATTERN = re.compile(r'^([A-Z])(\d{1,3})$')
MAX_ROWS = len(string.ascii_uppercase)


@attrs.define(unsafe_hash=True)
class Seat:
    """
    One seat of the cinema room.

    Identity is (row, number). The booked flag is state, not identity, so a
    clone held in a provisional selection still equals the stored seat.
    """

    row: str
    number: int
    booked: bool = attrs.field(default=False, eq=False)

    def __str__(self) -> str:
        return f'{self.row}{self.number}'

    @property
    def code(self) -> str:
        return str(self)

    def clone(self) -> 'Seat':
        return attrs.evolve(self)

    @classmethod
    def parse(cls, code: str, *, booked: bool = False) -> 'Seat':
        match = _SEAT_CODE_PATTERN.match(code.strip().upper())
        if not match:
            raise UnknownSeatError(code)
        return cls(row=match.group(1), number=int(match.group(2)), booked=booked)


@attrs.frozen
class SeatLayout:
    """Fixed seat arrangement of the room: rows lettered from 'A', numbered from 1."""

    seat_count: int = 50
    seats_per_row: int = 10

    def __attrs_post_init__(self) -> None:
        if self.seat_count <= 0 or self.seats_per_row <= 0:
            raise ValueError('Seat layout dimensions must be positive')
        if self.row_count > MAX_ROWS:
            raise ValueError(f'Seat layout cannot have more than {MAX_ROWS} rows')

    @property
    def row_count(self) -> int:
        return -(-self.seat_count // self.seats_per_row)

    def seat_for_index(self, index: int, *, booked: bool = False) -> Seat:
        return Seat(
            row=chr(ord('A') + index // self.seats_per_row),
            number=index % self.seats_per_row + 1,
            booked=booked,
        )

    def index_of(self, row: str, number: int) -> Optional[int]:
        if len(row) != 1 or not 'A' <= row <= 'Z':
            return None
        if not 1 <= number <= self.seats_per_row:
            return None
        index = (ord(row) - ord('A')) * self.seats_per_row + number - 1
        return index if index < self.seat_count else None
