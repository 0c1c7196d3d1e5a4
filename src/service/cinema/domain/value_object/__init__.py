"""Cinema Domain Value Objects"""

from src.service.cinema.domain.value_object.seat import Seat, SeatLayout
from src.service.cinema.domain.value_object.show_slot import ShowSlot

__all__ = ['Seat', 'SeatLayout', 'ShowSlot']
