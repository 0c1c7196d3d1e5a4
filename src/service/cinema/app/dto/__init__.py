"""Application layer DTOs"""

from src.service.cinema.app.dto.booking_summary import BookingSummary
from src.service.cinema.app.dto.ledger_audit_result import LedgerAuditResult
from src.service.cinema.app.dto.screening_listing import ScreeningListing
from src.service.cinema.app.dto.screening_report_row import ScreeningReportRow

__all__ = [
    'BookingSummary',
    'LedgerAuditResult',
    'ScreeningListing',
    'ScreeningReportRow',
]
