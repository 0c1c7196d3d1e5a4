"""
In-memory doubles for cinema use case tests

Repositories stage writes inside their unit of work and apply them to the
shared store on commit, so rollback and isolation behave like the SQL
implementation. Every repository call yields to the event loop once, which
lets concurrent use cases interleave at their I/O points.
"""

import asyncio
from datetime import date
from typing import Dict, Generic, List, Optional, TypeVar

import attrs
from uuid_utils import UUID

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.cinema.app.interface.i_booking_repo import IBookingRepo
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.app.interface.i_movie_repo import IMovieRepo
from src.service.cinema.app.interface.i_screening_repo import IScreeningRepo
from src.service.cinema.domain.entity.booking_entity import Booking
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.screening_entity import Screening
from src.service.cinema.domain.value_object.show_slot import ShowSlot


_E = TypeVar('_E')


def _copy_screening(screening: Screening) -> Screening:
    return screening.with_seat_map(screening.seat_map.clone())


def _copy_booking(booking: Booking) -> Booking:
    return attrs.evolve(booking, seats=[seat.clone() for seat in booking.seats])


def _copy_movie(movie: Movie) -> Movie:
    return attrs.evolve(movie, actors=list(movie.actors))


class InMemoryCinemaStore:
    """Committed state, shared by every unit of work of one test."""

    def __init__(self) -> None:
        self.screenings: Dict[str, Screening] = {}
        self.bookings: Dict[str, Booking] = {}
        self.movies: Dict[str, Movie] = {}
        self.commit_count = 0

    def add_movie(self, movie: Movie) -> Movie:
        self.movies[str(movie.id)] = _copy_movie(movie)
        return movie

    def add_screening(self, screening: Screening) -> Screening:
        self.screenings[str(screening.id)] = _copy_screening(screening)
        return screening

    def add_booking(self, booking: Booking) -> Booking:
        self.bookings[str(booking.id)] = _copy_booking(booking)
        return booking

    def seat_bitstring(self, screening_id: UUID) -> str:
        return self.screenings[str(screening_id)].seat_map.encode()


class _StagedTable(Generic[_E]):
    def __init__(self, committed: Dict[str, _E], copy) -> None:
        self._committed = committed
        self._copy = copy
        self._pending: Dict[str, Optional[_E]] = {}

    def get(self, key: str) -> Optional[_E]:
        entity = self._pending[key] if key in self._pending else self._committed.get(key)
        return self._copy(entity) if entity is not None else None

    def put(self, key: str, entity: _E) -> None:
        self._pending[key] = self._copy(entity)

    def remove(self, key: str) -> None:
        self._pending[key] = None

    def all(self) -> List[_E]:
        merged = {**self._committed, **self._pending}
        return [self._copy(entity) for entity in merged.values() if entity is not None]

    def apply(self) -> None:
        for key, entity in self._pending.items():
            if entity is None:
                self._committed.pop(key, None)
            else:
                self._committed[key] = entity
        self._pending.clear()

    def discard(self) -> None:
        self._pending.clear()


class InMemoryScreeningRepo(IScreeningRepo):
    def __init__(self, table: _StagedTable[Screening]) -> None:
        self.table = table

    async def load_screening(self, *, screening_id: UUID) -> Optional[Screening]:
        await asyncio.sleep(0)
        return self.table.get(str(screening_id))

    async def save_screening(self, *, screening: Screening) -> Screening:
        await asyncio.sleep(0)
        self.table.put(str(screening.id), screening)
        return screening

    async def delete_screening(self, *, screening_id: UUID) -> None:
        await asyncio.sleep(0)
        self.table.remove(str(screening_id))

    async def load_screenings_all(self) -> List[Screening]:
        await asyncio.sleep(0)
        return sorted(self.table.all(), key=lambda s: (s.date, s.hour))


class InMemoryBookingRepo(IBookingRepo):
    def __init__(self, table: _StagedTable[Booking]) -> None:
        self.table = table

    async def load_booking(self, *, booking_id: UUID) -> Optional[Booking]:
        await asyncio.sleep(0)
        return self.table.get(str(booking_id))

    async def create_booking(self, *, booking: Booking) -> Booking:
        await asyncio.sleep(0)
        self.table.put(str(booking.id), booking)
        return booking

    async def delete_booking(self, *, booking_id: UUID) -> None:
        await asyncio.sleep(0)
        self.table.remove(str(booking_id))

    async def load_bookings_by_screening(self, *, screening_id: UUID) -> List[Booking]:
        await asyncio.sleep(0)
        return [b for b in self.table.all() if b.screening_id == screening_id]

    async def load_bookings_by_user(self, *, username: str) -> List[Booking]:
        await asyncio.sleep(0)
        return [b for b in self.table.all() if b.username == username]


class InMemoryMovieRepo(IMovieRepo):
    def __init__(self, table: _StagedTable[Movie]) -> None:
        self.table = table

    async def load_movie(self, *, movie_id: UUID) -> Optional[Movie]:
        await asyncio.sleep(0)
        return self.table.get(str(movie_id))

    async def save_movie(self, *, movie: Movie) -> Movie:
        await asyncio.sleep(0)
        self.table.put(str(movie.id), movie)
        return movie

    async def load_movies_all(self) -> List[Movie]:
        await asyncio.sleep(0)
        return self.table.all()

    async def delete_movie(self, *, movie_id: UUID) -> None:
        await asyncio.sleep(0)
        self.table.remove(str(movie_id))


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: InMemoryCinemaStore, *, fail_on_commit: bool = False) -> None:
        self.store = store
        self.fail_on_commit = fail_on_commit
        self._tables: list[_StagedTable] = []

    async def __aenter__(self) -> AbstractUnitOfWork:
        screenings = _StagedTable(self.store.screenings, _copy_screening)
        bookings = _StagedTable(self.store.bookings, _copy_booking)
        movies = _StagedTable(self.store.movies, _copy_movie)
        self._tables = [screenings, bookings, movies]

        self.screening_repo = InMemoryScreeningRepo(screenings)
        self.booking_repo = InMemoryBookingRepo(bookings)
        self.movie_repo = InMemoryMovieRepo(movies)
        return await super().__aenter__()

    async def _commit(self) -> None:
        if self.fail_on_commit:
            raise RuntimeError('Simulated storage failure on commit')
        for table in self._tables:
            table.apply()
        self.store.commit_count += 1

    async def rollback(self) -> None:
        for table in self._tables:
            table.discard()


class InMemoryUnitOfWorkFactory:
    def __init__(self, store: InMemoryCinemaStore) -> None:
        self.store = store
        self.fail_on_commit = False

    def __call__(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(self.store, fail_on_commit=self.fail_on_commit)


class FixedClock(IClock):
    def __init__(self, current: ShowSlot) -> None:
        self.current = current

    def now(self) -> ShowSlot:
        return self.current

    def set(self, day: date, hour: int) -> None:
        self.current = ShowSlot(date=day, hour=hour)
