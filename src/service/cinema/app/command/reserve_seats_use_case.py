"""
Reserve Seats Use Case - check-then-write inside one serialized section
"""

from typing import Sequence, Union

from opentelemetry import trace
from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock, screening_key
from src.service.cinema.domain.cinema_errors import (
    NoSeatsSelectedError,
    PastScreeningError,
    SeatUnavailableError,
    UnknownSeatError,
)
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.seat_map import SeatMap
from src.service.cinema.domain.value_object.seat import Seat


class ReserveSeatsUseCase:
    """
    Reserve Seats Use Case

    Flow (under the screening lock, in one unit of work):
    1. Load the screening and reject it if it has already started
    2. Check every selected seat against a clone of the seat map
    3. Mark the seats booked on the clone
    4. Persist the screening with the new seat map and the booking, then commit

    The loaded seat map is never touched, so any failure before commit leaves
    the stored and in-memory state as it was.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        screening_lock: IScreeningLock,
        clock: IClock,
    ) -> None:
        self.uow_factory = uow_factory
        self.screening_lock = screening_lock
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _normalize_selection(seats: Sequence[Union[Seat, str]]) -> list[Seat]:
        selection = [seat.clone() if isinstance(seat, Seat) else Seat.parse(seat) for seat in seats]
        # Selecting a seat twice is still one seat
        return list(dict.fromkeys(selection))

    @staticmethod
    def _book_on(seat_map: SeatMap, selection: list[Seat]) -> None:
        for seat in selection:
            stored = seat_map.find(seat)
            if stored is None:
                raise UnknownSeatError(seat.code)
            if stored.booked:
                raise SeatUnavailableError(stored.clone())

        for seat in selection:
            seat_map.set_booked(seat, True)

    @Logger.io
    async def execute(
        self,
        *,
        screening_id: UUID,
        username: str,
        seats: Sequence[Union[Seat, str]],
    ) -> Booking:
        selection = self._normalize_selection(seats)
        if not selection:
            raise NoSeatsSelectedError()

        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={
                'screening.id': str(screening_id),
                'seat.quantity': len(selection),
            },
        ):
            async with self.screening_lock.hold(screening_key(screening_id)):
                async with self.uow_factory() as uow:
                    screening = await uow.screening_repo.load_screening(
                        screening_id=screening_id
                    )
                    if screening is None:
                        raise NotFoundError(f'Screening {screening_id} not found')
                    if screening.is_past(self.clock.now()):
                        raise PastScreeningError(
                            'Cannot book seats for a screening that has already started'
                        )

                    seat_map = screening.seat_map.clone()
                    self._book_on(seat_map, selection)

                    booking = Booking.create(
                        screening_id=screening.id,
                        username=username,
                        seats=selection,
                    )
                    await uow.screening_repo.save_screening(
                        screening=screening.with_seat_map(seat_map)
                    )
                    await uow.booking_repo.create_booking(booking=booking)
                    await uow.commit()

            Logger.base.info(
                f'✅ [RESERVE] {username} booked {booking.formatted_seat_list} '
                f'for screening {screening_id}'
            )
            return booking
