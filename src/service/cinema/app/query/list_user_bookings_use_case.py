from typing import List, Optional

from src.platform.database.unit_of_work import UnitOfWorkFactory
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.booking_summary import BookingSummary


class ListUserBookingsUseCase:
    """Booking history of one user, soonest screening first."""

    def __init__(
        self, *, uow_factory: UnitOfWorkFactory, seat_price: int, currency_symbol: str = '£'
    ) -> None:
        self.uow_factory = uow_factory
        self.seat_price = seat_price
        self.currency_symbol = currency_symbol

    @Logger.io
    async def execute(
        self, *, username: str, movie_query: Optional[str] = None
    ) -> List[BookingSummary]:
        async with self.uow_factory() as uow:
            bookings = await uow.booking_repo.load_bookings_by_user(username=username)
            screenings = {s.id: s for s in await uow.screening_repo.load_screenings_all()}
            movies = {m.id: m for m in await uow.movie_repo.load_movies_all()}

        needle = movie_query.strip().casefold() if movie_query else ''
        summaries = []
        for booking in bookings:
            screening = screenings.get(booking.screening_id)
            if screening is None:
                Logger.base.warning(
                    f'⚠️ [HISTORY] Booking {booking.id} points at missing screening '
                    f'{booking.screening_id}'
                )
                continue
            movie = movies.get(screening.movie_id)
            movie_name = movie.name if movie else ''
            if needle and needle not in movie_name.casefold():
                continue

            summaries.append(
                BookingSummary(
                    booking_id=booking.id,
                    screening_id=screening.id,
                    movie_name=movie_name,
                    date=screening.date,
                    formatted_time=screening.slot.formatted_time,
                    formatted_seats=booking.formatted_seat_list,
                    seat_count=booking.seat_count,
                    total_price=booking.total_price(self.seat_price),
                    currency_symbol=self.currency_symbol,
                )
            )

        return sorted(summaries, key=lambda s: (s.date, s.formatted_time, s.movie_name))
