from opentelemetry import trace
from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock, screening_key


class DeleteScreeningUseCase:
    """
    Delete a screening and every booking of it, in one unit of work.

    Past screenings can be deleted too.
    """

    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        screening_lock: IScreeningLock,
    ) -> None:
        self.uow_factory = uow_factory
        self.screening_lock = screening_lock
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, screening_id: UUID) -> int:
        """Returns the number of bookings removed with the screening."""
        with self.tracer.start_as_current_span(
            'use_case.delete_screening',
            attributes={'screening.id': str(screening_id)},
        ):
            async with self.screening_lock.hold(screening_key(screening_id)):
                async with self.uow_factory() as uow:
                    screening = await uow.screening_repo.load_screening(
                        screening_id=screening_id
                    )
                    if screening is None:
                        raise NotFoundError(f'Screening {screening_id} not found')

                    bookings = await uow.booking_repo.load_bookings_by_screening(
                        screening_id=screening_id
                    )
                    for booking in bookings:
                        await uow.booking_repo.delete_booking(booking_id=booking.id)
                    await uow.screening_repo.delete_screening(screening_id=screening_id)
                    await uow.commit()

            Logger.base.info(
                f'🗑️ [DELETE] Screening {screening_id} deleted with {len(bookings)} bookings'
            )
            return len(bookings)
