"""
Unit of Work Pattern - one session and one transaction per business operation

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories share the UoW session
- Use cases coordinate screening, booking and movie repositories through one UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


if TYPE_CHECKING:
    from src.service.cinema.app.interface.i_booking_repo import IBookingRepo
    from src.service.cinema.app.interface.i_movie_repo import IMovieRepo
    from src.service.cinema.app.interface.i_screening_repo import IScreeningRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Cinema Service

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate transactions across multiple repositories
    - Provide commit/rollback interface

    Usage:
        async with uow_factory() as uow:
            await uow.screening_repo.save_screening(screening=...)
            await uow.booking_repo.create_booking(booking=...)
            await uow.commit()

    Leaving the block without commit() rolls back.
    """

    screening_repo: IScreeningRepo
    booking_repo: IBookingRepo
    movie_repo: IMovieRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


UnitOfWorkFactory = Callable[[], AbstractUnitOfWork]


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Opens a fresh session from the session maker on enter and closes it on exit.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.cinema.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
        from src.service.cinema.driven_adapter.repo.movie_repo_impl import MovieRepoImpl
        from src.service.cinema.driven_adapter.repo.screening_repo_impl import (
            ScreeningRepoImpl,
        )

        self.session = self._session_maker()

        # Create repositories with shared session
        self.screening_repo = ScreeningRepoImpl(session=self.session)
        self.booking_repo = BookingRepoImpl(session=self.session)
        self.movie_repo = MovieRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'Unit of work used outside its context'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
