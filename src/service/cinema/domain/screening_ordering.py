"""
Screening ordering strategies

The caller picks a ScreeningOrder per listing call; nothing here keeps a
"current comparator" around.
"""

from datetime import date
from typing import Callable, Sequence, Tuple, TypeVar

from src.service.cinema.domain.enum.screening_order import ScreeningOrder
from src.service.cinema.domain.entity.screening_entity import Screening


_T = TypeVar('_T')


def start_time_key(screening: Screening) -> Tuple[date, int]:
    """Earlier dates first, then earlier hours. Equal keys cannot coexist in one room."""
    return (screening.date, screening.hour)


def title_key(movie_name: str, screening: Screening) -> Tuple[str, date, int]:
    return (movie_name, *start_time_key(screening))


def sort_screenings(
    items: Sequence[_T],
    *,
    order: ScreeningOrder,
    screening_of: Callable[[_T], Screening],
    movie_name_of: Callable[[_T], str],
) -> list[_T]:
    if order == ScreeningOrder.TITLE:
        return sorted(items, key=lambda item: title_key(movie_name_of(item), screening_of(item)))
    return sorted(items, key=lambda item: start_time_key(screening_of(item)))
