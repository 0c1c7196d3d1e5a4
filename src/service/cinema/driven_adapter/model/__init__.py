"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.cinema.driven_adapter.model.booking_model import BookingModel
from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.model.screening_model import ScreeningModel

__all__ = [
    'BookingModel',
    'MovieModel',
    'ScreeningModel',
]
