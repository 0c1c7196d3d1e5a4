from datetime import date

import attrs
from uuid_utils import UUID, uuid7

from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.seat_map import SeatMap
from src.service.cinema.domain.value_object.seat import SeatLayout
from src.service.cinema.domain.value_object.show_slot import ShowSlot


@attrs.define
class Screening:
    """
    One showing of a movie in the cinema room.

    The seat map is the authoritative seat state of the screening. Writers
    never mutate a loaded screening in place: they book on ``seat_map.clone()``
    and persist ``with_seat_map(...)``, so a failed commit leaves this object
    untouched.
    """

    id: UUID
    movie_id: UUID
    date: date
    hour: int
    seat_map: SeatMap = attrs.field(eq=False)

    @classmethod
    @Logger.io
    def create(cls, *, movie_id: UUID, slot: ShowSlot, layout: SeatLayout) -> 'Screening':
        return cls(
            id=uuid7(),
            movie_id=movie_id,
            date=slot.date,
            hour=slot.hour,
            seat_map=SeatMap.empty(layout),
        )

    @property
    def slot(self) -> ShowSlot:
        return ShowSlot(date=self.date, hour=self.hour)

    def is_past(self, now: ShowSlot) -> bool:
        return self.slot.is_past(now)

    @property
    def total_seats(self) -> int:
        return self.seat_map.total()

    @property
    def booked_seats(self) -> int:
        return self.seat_map.count_booked()

    @property
    def available_seats(self) -> int:
        return self.seat_map.count_free()

    def with_seat_map(self, seat_map: SeatMap) -> 'Screening':
        return attrs.evolve(self, seat_map=seat_map)
