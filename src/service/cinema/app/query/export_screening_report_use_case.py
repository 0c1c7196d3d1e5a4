"""
Export Screening Report Use Case

Projects screenings into report rows (movie name, date, hour, total, booked,
available) and hands them to the CSV writer.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from uuid_utils import UUID

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.screening_listing import ScreeningListing
from src.service.cinema.app.dto.screening_report_row import ScreeningReportRow
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.domain.enum.export_scope import ExportScope
from src.service.cinema.domain.screening_ordering import start_time_key
from src.service.cinema.driven_adapter.export.csv_report_writer import CsvReportWriter


UNKNOWN_MOVIE_NAME = 'Unknown movie'


def to_report_rows(listings: Iterable[ScreeningListing]) -> List[ScreeningReportRow]:
    return [
        ScreeningReportRow(
            movie_name=listing.movie_name,
            date=listing.screening.date,
            hour=listing.screening.hour,
            total=listing.screening.total_seats,
            booked=listing.screening.booked_seats,
            available=listing.screening.available_seats,
        )
        for listing in listings
    ]


class ExportScreeningReportUseCase:
    def __init__(
        self,
        *,
        uow_factory: UnitOfWorkFactory,
        clock: IClock,
        report_writer: CsvReportWriter,
    ) -> None:
        self.uow_factory = uow_factory
        self.clock = clock
        self.report_writer = report_writer

    @Logger.io
    async def execute(
        self,
        *,
        scope: ExportScope = ExportScope.ALL,
        screening_ids: Optional[Sequence[UUID]] = None,
    ) -> List[ScreeningReportRow]:
        if scope == ExportScope.SELECTED and screening_ids is None:
            raise DomainError('Select the screenings to export')

        async with self.uow_factory() as uow:
            screenings = await uow.screening_repo.load_screenings_all()
            movies = {m.id: m for m in await uow.movie_repo.load_movies_all()}

        if scope == ExportScope.UPCOMING:
            now = self.clock.now()
            screenings = [s for s in screenings if not s.is_past(now)]
        elif scope == ExportScope.SELECTED:
            wanted = {str(screening_id) for screening_id in screening_ids or []}
            screenings = [s for s in screenings if str(s.id) in wanted]

        listings = [
            ScreeningListing(
                screening=screening,
                movie_name=movies[screening.movie_id].name
                if screening.movie_id in movies
                else UNKNOWN_MOVIE_NAME,
            )
            for screening in sorted(screenings, key=start_time_key)
        ]
        return to_report_rows(listings)

    @Logger.io
    async def export_csv(
        self,
        *,
        scope: ExportScope = ExportScope.ALL,
        screening_ids: Optional[Sequence[UUID]] = None,
        filename: Optional[str] = None,
    ) -> Path:
        rows = await self.execute(scope=scope, screening_ids=screening_ids)
        return self.report_writer.write(rows, filename=filename)
