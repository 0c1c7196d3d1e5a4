from abc import ABC, abstractmethod

from src.service.cinema.domain.value_object.show_slot import ShowSlot


class IClock(ABC):
    """Source of "now" for the past-screening rule."""

    @abstractmethod
    def now(self) -> ShowSlot:
        """Current local date and hour of the cinema."""
        pass
