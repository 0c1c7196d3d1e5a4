"""
Screening Repository Interface

Screenings are persisted together with their seat map bitstring.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.cinema.domain.entity.screening_entity import Screening


class IScreeningRepo(ABC):
    @abstractmethod
    async def load_screening(self, *, screening_id: UUID) -> Optional[Screening]:
        """
        Load one screening with its current seat map.

        Returns:
            Screening entity or None if not found
        """
        pass

    @abstractmethod
    async def save_screening(self, *, screening: Screening) -> Screening:
        """Insert the screening, or overwrite the stored one with the same id."""
        pass

    @abstractmethod
    async def delete_screening(self, *, screening_id: UUID) -> None:
        pass

    @abstractmethod
    async def load_screenings_all(self) -> List[Screening]:
        pass
