from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    screening_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('screening.id'), nullable=False, index=True
    )
    username: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    seat_codes: Mapped[str] = mapped_column(String, nullable=False)  # e.g. 'A8,D10'
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=True
    )
