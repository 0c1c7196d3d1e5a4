"""Seat ledger audit result DTO."""

import attrs
from uuid_utils import UUID

from src.service.cinema.domain.seat_ledger_audit import SeatLedgerReport


@attrs.define(frozen=True)
class LedgerAuditResult:
    screening_id: UUID
    booking_count: int
    report: SeatLedgerReport

    @property
    def is_consistent(self) -> bool:
        return self.report.is_consistent
