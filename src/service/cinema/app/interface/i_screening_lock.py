"""
Screening Lock Interface

Serializes read-modify-write sequences on one key: a screening id for
reserve, cancel and delete, a time slot for scheduling. Holders of
different keys never wait on each other.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager

from uuid_utils import UUID

from src.service.cinema.domain.value_object.show_slot import ShowSlot


def screening_key(screening_id: UUID) -> str:
    return f'screening:{screening_id}'


def slot_key(slot: ShowSlot) -> str:
    return f'slot:{slot.date.isoformat()}:{slot.hour}'


class IScreeningLock(ABC):
    @abstractmethod
    def hold(self, key: str) -> AsyncContextManager[None]:
        """
        Async context manager holding the lock for ``key``.

        Usage:
            async with screening_lock.hold(screening_key(screening_id)):
                ...
        """
        pass
