"""
CSV Report Writer

Writes screening report rows with the header
``Movie Title,Date,Time,Total Seats,Booked Seats,Available Seats``.
"""

import csv
from pathlib import Path
from typing import Iterable, Optional, TextIO

from src.platform.config.core_setting import settings
from src.platform.constant.path import EXPORT_DIR
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.screening_report_row import ScreeningReportRow


CSV_HEADER = [
    'Movie Title',
    'Date',
    'Time',
    'Total Seats',
    'Booked Seats',
    'Available Seats',
]


class CsvReportWriter:
    def __init__(self, *, export_dir: Optional[Path] = None) -> None:
        self.export_dir = Path(export_dir) if export_dir else EXPORT_DIR

    @staticmethod
    def write_rows(stream: TextIO, rows: Iterable[ScreeningReportRow]) -> int:
        writer = csv.writer(stream)
        writer.writerow(CSV_HEADER)
        count = 0
        for row in rows:
            writer.writerow(
                [
                    row.movie_name,
                    row.date.isoformat(),
                    row.formatted_time,
                    row.total,
                    row.booked,
                    row.available,
                ]
            )
            count += 1
        return count

    @Logger.io
    def write(
        self, rows: Iterable[ScreeningReportRow], *, filename: Optional[str] = None
    ) -> Path:
        self.export_dir.mkdir(parents=True, exist_ok=True)
        path = self.export_dir / (filename or settings.EXPORT_FILENAME)
        with path.open('w', newline='', encoding='utf-8') as stream:
            count = self.write_rows(stream, rows)
        Logger.base.info(f'📄 [EXPORT] Wrote {count} screenings to {path}')
        return path
