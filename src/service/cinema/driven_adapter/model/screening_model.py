from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ScreeningModel(Base):
    __tablename__ = 'screening'
    # One room: a time slot holds at most one screening
    __table_args__ = (UniqueConstraint('date', 'hour', name='uq_screening_date_hour'),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    movie_id: Mapped[str] = mapped_column(String(36), ForeignKey('movie.id'), nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    hour: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_count: Mapped[int] = mapped_column(Integer, nullable=False)
    seats_per_row: Mapped[int] = mapped_column(Integer, nullable=False)
    # '0' free / '1' booked, one character per seat in layout order
    seat_bitstring: Mapped[str] = mapped_column(String, nullable=False)
