"""
Booking Repository Implementation (SQLAlchemy)
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_booking_repo import IBookingRepo
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.driven_adapter.model.booking_model import BookingModel


class BookingRepoImpl(IBookingRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=UUID(db_booking.id),
            screening_id=UUID(db_booking.screening_id),
            username=db_booking.username,
            seats=Booking.parse_seat_codes(db_booking.seat_codes),
            created_at=db_booking.created_at,
        )

    @Logger.io
    async def load_booking(self, *, booking_id: UUID) -> Optional[Booking]:
        db_booking = await self.session.get(BookingModel, str(booking_id))
        return self._to_entity(db_booking) if db_booking else None

    @Logger.io
    async def create_booking(self, *, booking: Booking) -> Booking:
        self.session.add(
            BookingModel(
                id=str(booking.id),
                screening_id=str(booking.screening_id),
                username=booking.username,
                seat_codes=booking.seat_codes(),
                created_at=booking.created_at,
            )
        )
        await self.session.flush()
        return booking

    @Logger.io
    async def delete_booking(self, *, booking_id: UUID) -> None:
        await self.session.execute(delete(BookingModel).where(BookingModel.id == str(booking_id)))

    @Logger.io
    async def load_bookings_by_screening(self, *, screening_id: UUID) -> List[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.screening_id == str(screening_id))
            .order_by(BookingModel.id)  # UUID7 ids sort by creation time
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def load_bookings_by_user(self, *, username: str) -> List[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.username == username)
            .order_by(BookingModel.id)
        )
        return [self._to_entity(row) for row in result.scalars().all()]
