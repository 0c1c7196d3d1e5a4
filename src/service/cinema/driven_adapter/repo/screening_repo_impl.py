"""
Screening Repository Implementation (SQLAlchemy)

The seat map is stored as its bitstring next to the layout it was created
with, so a change of the configured layout never reinterprets old rows.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_screening_repo import IScreeningRepo
from src.service.cinema.domain.entity.screening_entity import Screening
from src.service.cinema.domain.entity.seat_map import SeatMap
from src.service.cinema.domain.value_object.seat import SeatLayout
from src.service.cinema.driven_adapter.model.screening_model import ScreeningModel


class ScreeningRepoImpl(IScreeningRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_screening: ScreeningModel) -> Screening:
        layout = SeatLayout(
            seat_count=db_screening.seat_count,
            seats_per_row=db_screening.seats_per_row,
        )
        return Screening(
            id=UUID(db_screening.id),
            movie_id=UUID(db_screening.movie_id),
            date=db_screening.date,
            hour=db_screening.hour,
            seat_map=SeatMap.decode(layout, db_screening.seat_bitstring),
        )

    @Logger.io
    async def load_screening(self, *, screening_id: UUID) -> Optional[Screening]:
        db_screening = await self.session.get(ScreeningModel, str(screening_id))
        return self._to_entity(db_screening) if db_screening else None

    @Logger.io
    async def save_screening(self, *, screening: Screening) -> Screening:
        layout = screening.seat_map.layout
        db_screening = await self.session.get(ScreeningModel, str(screening.id))
        if db_screening is None:
            db_screening = ScreeningModel(id=str(screening.id))
            self.session.add(db_screening)

        db_screening.movie_id = str(screening.movie_id)
        db_screening.date = screening.date
        db_screening.hour = screening.hour
        db_screening.seat_count = layout.seat_count
        db_screening.seats_per_row = layout.seats_per_row
        db_screening.seat_bitstring = screening.seat_map.encode()

        await self.session.flush()
        return screening

    @Logger.io
    async def delete_screening(self, *, screening_id: UUID) -> None:
        await self.session.execute(
            delete(ScreeningModel).where(ScreeningModel.id == str(screening_id))
        )

    @Logger.io
    async def load_screenings_all(self) -> List[Screening]:
        result = await self.session.execute(
            select(ScreeningModel).order_by(ScreeningModel.date, ScreeningModel.hour)
        )
        return [self._to_entity(row) for row in result.scalars().all()]
