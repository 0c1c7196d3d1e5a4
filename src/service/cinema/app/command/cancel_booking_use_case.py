"""
Cancel Booking Use Case - frees exactly the seats of one booking
"""

from opentelemetry import trace
from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock, screening_key
from src.service.cinema.domain.cinema_errors import PastScreeningError
from src.service.cinema.domain.entity.booking_entity import Booking


class CancelBookingUseCase:
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

    async def _screening_id_of(self, booking_id: UUID) -> UUID:
        async with self.uow_factory() as uow:
            booking = await uow.booking_repo.load_booking(booking_id=booking_id)
        if booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')
        return booking.screening_id

    @Logger.io
    async def execute(self, *, booking_id: UUID) -> Booking:
        """
        Cancel a booking whose screening has not started yet.

        The booking is looked up once to find which screening lock to take,
        then reloaded under that lock, since it may have been cancelled in
        between.

        Raises:
            NotFoundError: booking (or its screening) does not exist
            PastScreeningError: the screening start is not strictly in the future
        """
        with self.tracer.start_as_current_span(
            'use_case.cancel_booking',
            attributes={'booking.id': str(booking_id)},
        ):
            screening_id = await self._screening_id_of(booking_id)

            async with self.screening_lock.hold(screening_key(screening_id)):
                async with self.uow_factory() as uow:
                    booking = await uow.booking_repo.load_booking(booking_id=booking_id)
                    if booking is None:
                        raise NotFoundError(f'Booking {booking_id} not found')

                    screening = await uow.screening_repo.load_screening(
                        screening_id=screening_id
                    )
                    if screening is None:
                        raise NotFoundError(f'Screening {screening_id} not found')
                    if screening.is_past(self.clock.now()):
                        raise PastScreeningError(
                            'Cannot cancel a booking for a screening that has already started'
                        )

                    seat_map = screening.seat_map.clone()
                    for seat in booking.seats:
                        seat_map.set_booked(seat, False)

                    await uow.screening_repo.save_screening(
                        screening=screening.with_seat_map(seat_map)
                    )
                    await uow.booking_repo.delete_booking(booking_id=booking.id)
                    await uow.commit()

            Logger.base.info(
                f'🗑️ [CANCEL] Booking {booking_id} cancelled, freed {booking.formatted_seat_list}'
            )
            return booking
