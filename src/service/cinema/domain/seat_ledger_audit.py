"""
Seat ledger audit

Checks the invariant tying bookings to the seat map: the seats held by all
live bookings of a screening are exactly the seats marked booked, and no seat
is held twice.
"""

from collections import Counter
from typing import Iterable, List

import attrs

from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.seat_map import SeatMap
from src.service.cinema.domain.value_object.seat import Seat


@attrs.frozen
class SeatLedgerReport:
    orphaned_booked_seats: List[Seat]  # booked in the map, held by no booking
    free_but_held_seats: List[Seat]  # held by a booking, free in the map
    multiply_held_seats: List[Seat]

    @property
    def is_consistent(self) -> bool:
        return not (
            self.orphaned_booked_seats or self.free_but_held_seats or self.multiply_held_seats
        )


def audit_seat_ledger(seat_map: SeatMap, bookings: Iterable[Booking]) -> SeatLedgerReport:
    held = Counter(seat for booking in bookings for seat in booking.seats)
    booked = {seat for seat in seat_map if seat.booked}

    def ordered(seats: Iterable[Seat]) -> List[Seat]:
        return sorted((s.clone() for s in seats), key=lambda s: (s.row, s.number))

    free_but_held = []
    for seat in held:
        stored = seat_map.find(seat)
        if stored is None or not stored.booked:
            free_but_held.append(seat)

    return SeatLedgerReport(
        orphaned_booked_seats=ordered(booked - set(held)),
        free_but_held_seats=ordered(free_but_held),
        multiply_held_seats=ordered(seat for seat, count in held.items() if count > 1),
    )
