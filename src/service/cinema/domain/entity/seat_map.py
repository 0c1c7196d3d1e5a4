"""
Seat Map - per-screening seat inventory

The stored form is a bitstring with one character per seat in layout order:
'0' free, '1' booked. Length always equals the layout's seat count.
"""

from typing import Iterable, Iterator, Optional

from src.service.cinema.domain.cinema_errors import SeatMapFormatError, UnknownSeatError
from src.service.cinema.domain.value_object.seat import Seat, SeatLayout


FREE = '0'
BOOKED = '1'


class SeatMap:
    def __init__(self, layout: SeatLayout, seats: Iterable[Seat]) -> None:
        self.layout = layout
        self._seats: list[Seat] = list(seats)
        if len(self._seats) != layout.seat_count:
            raise SeatMapFormatError(
                f'Seat map holds {len(self._seats)} seats, layout expects {layout.seat_count}'
            )

    @classmethod
    def empty(cls, layout: SeatLayout) -> 'SeatMap':
        return cls(layout, (layout.seat_for_index(i) for i in range(layout.seat_count)))

    @classmethod
    def decode(cls, layout: SeatLayout, bitstring: str) -> 'SeatMap':
        if len(bitstring) != layout.seat_count:
            raise SeatMapFormatError(
                f'Seat bitstring has length {len(bitstring)}, layout expects {layout.seat_count}'
            )
        if invalid := set(bitstring) - {FREE, BOOKED}:
            raise SeatMapFormatError(
                f'Seat bitstring contains invalid characters: {"".join(sorted(invalid))}'
            )
        return cls(
            layout,
            (
                layout.seat_for_index(i, booked=flag == BOOKED)
                for i, flag in enumerate(bitstring)
            ),
        )

    def encode(self) -> str:
        return ''.join(BOOKED if seat.booked else FREE for seat in self._seats)

    def seat_at(self, row: str, number: int) -> Optional[Seat]:
        index = self.layout.index_of(row, number)
        return None if index is None else self._seats[index]

    def find(self, seat: Seat) -> Optional[Seat]:
        """Stored seat with the same identity as ``seat``."""
        return self.seat_at(seat.row, seat.number)

    def set_booked(self, seat: Seat, booked: bool) -> None:
        stored = self.find(seat)
        if stored is None:
            raise UnknownSeatError(seat.code)
        stored.booked = booked

    def count_booked(self) -> int:
        return sum(1 for seat in self._seats if seat.booked)

    def count_free(self) -> int:
        return len(self._seats) - self.count_booked()

    def total(self) -> int:
        return len(self._seats)

    def booked_seats(self) -> list[Seat]:
        return [seat.clone() for seat in self._seats if seat.booked]

    def clone(self) -> 'SeatMap':
        return SeatMap(self.layout, (seat.clone() for seat in self._seats))

    def __iter__(self) -> Iterator[Seat]:
        return iter(self._seats)

    def __len__(self) -> int:
        return len(self._seats)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeatMap):
            return NotImplemented
        return self.layout == other.layout and self.encode() == other.encode()

    def __repr__(self) -> str:
        return f'SeatMap(layout={self.layout!r}, seats={self.encode()!r})'
