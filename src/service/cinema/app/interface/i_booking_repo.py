"""
Booking Repository Interface
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.cinema.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    @abstractmethod
    async def load_booking(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def create_booking(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def delete_booking(self, *, booking_id: UUID) -> None:
        pass

    @abstractmethod
    async def load_bookings_by_screening(self, *, screening_id: UUID) -> List[Booking]:
        """All live bookings of one screening, oldest first."""
        pass

    @abstractmethod
    async def load_bookings_by_user(self, *, username: str) -> List[Booking]:
        pass
