from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.ledger_audit_result import LedgerAuditResult
from src.service.cinema.domain.seat_ledger_audit import audit_seat_ledger


class AuditSeatLedgerUseCase:
    """Compares a screening's seat map with the seats held by its live bookings."""

    def __init__(self, *, uow_factory: UnitOfWorkFactory) -> None:
        self.uow_factory = uow_factory

    @Logger.io
    async def execute(self, *, screening_id: UUID) -> LedgerAuditResult:
        async with self.uow_factory() as uow:
            screening = await uow.screening_repo.load_screening(screening_id=screening_id)
            if screening is None:
                raise NotFoundError(f'Screening {screening_id} not found')
            bookings = await uow.booking_repo.load_bookings_by_screening(
                screening_id=screening_id
            )

        report = audit_seat_ledger(screening.seat_map, bookings)
        if not report.is_consistent:
            Logger.base.warning(
                f'⚠️ [AUDIT] Screening {screening_id} is inconsistent: '
                f'orphaned={[str(s) for s in report.orphaned_booked_seats]}, '
                f'free_but_held={[str(s) for s in report.free_but_held_seats]}, '
                f'multiply_held={[str(s) for s in report.multiply_held_seats]}'
            )
        return LedgerAuditResult(
            screening_id=screening_id,
            booking_count=len(bookings),
            report=report,
        )
