"""
Cinema domain errors

Each error is a recoverable business outcome surfaced to the caller; none of
them is raised after state has been mutated.
"""

from typing import TYPE_CHECKING

from src.platform.exception.exceptions import ConflictError, DomainError


if TYPE_CHECKING:
    from src.service.cinema.domain.value_object.seat import Seat


class SeatMapFormatError(DomainError):
    """Stored seat bitstring does not fit the layout."""


class UnknownSeatError(DomainError):
    def __init__(self, seat_code: str) -> None:
        self.seat_code = seat_code
        super().__init__(f'Seat {seat_code} does not exist in this cinema room')


class SeatUnavailableError(ConflictError):
    def __init__(self, seat: 'Seat') -> None:
        self.seat = seat
        super().__init__(f'Seat {seat} is already booked')


class NoSeatsSelectedError(DomainError):
    def __init__(self) -> None:
        super().__init__('Please select at least one seat before continuing')


class PastSchedulingAttemptError(DomainError):
    def __init__(self) -> None:
        super().__init__('You cannot schedule a screening in the past')


class PastScreeningError(DomainError):
    def __init__(self, message: str = 'Screening has already started') -> None:
        super().__init__(message)


class SlotConflictError(ConflictError):
    def __init__(self, movie_name: str) -> None:
        self.movie_name = movie_name
        super().__init__(
            f'There already exists a screening for {movie_name} at this time slot'
        )
