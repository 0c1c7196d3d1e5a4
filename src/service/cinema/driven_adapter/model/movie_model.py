from typing import Optional

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movie'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    genre: Mapped[str] = mapped_column(String(100), nullable=False, default='')
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    director: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    actors: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    trailer_url: Mapped[str] = mapped_column(String(500), nullable=False, default='')
