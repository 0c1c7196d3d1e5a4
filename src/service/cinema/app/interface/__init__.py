"""Cinema Service Interfaces"""

from src.service.cinema.app.interface.i_booking_repo import IBookingRepo
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.app.interface.i_movie_repo import IMovieRepo
from src.service.cinema.app.interface.i_screening_lock import (
    IScreeningLock,
    screening_key,
    slot_key,
)
from src.service.cinema.app.interface.i_screening_repo import IScreeningRepo

__all__ = [
    'IBookingRepo',
    'IClock',
    'IMovieRepo',
    'IScreeningLock',
    'IScreeningRepo',
    'screening_key',
    'slot_key',
]
