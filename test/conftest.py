"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- Shared fixtures for the cinema domain (layout, fixed clock, sample movie)

Architecture:
- Unit tests (test/**/unit/): in-memory unit of work from test/service/cinema/helpers.py
- Integration tests (test/**/integration/): real SQLAlchemy + aiosqlite on a temporary file
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read the environment at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never touch the developer's cinema.db from tests
    os.environ['DATABASE_URL_ASYNC'] = 'sqlite+aiosqlite:///:memory:'
    os.environ.setdefault('SEAT_COUNT', '50')
    os.environ.setdefault('SEATS_PER_ROW', '10')
    os.environ.setdefault('SEAT_PRICE', '8')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from datetime import date, timedelta  # noqa: E402

import pytest  # noqa: E402

from src.service.cinema.domain.entity.movie_entity import Movie  # noqa: E402
from src.service.cinema.domain.value_object.seat import SeatLayout  # noqa: E402
from src.service.cinema.domain.value_object.show_slot import ShowSlot  # noqa: E402
from test.constants import NOW_DATE, NOW_HOUR  # noqa: E402
from test.service.cinema.helpers import FixedClock  # noqa: E402


@pytest.fixture
def layout() -> SeatLayout:
    return SeatLayout(seat_count=50, seats_per_row=10)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(ShowSlot(date=NOW_DATE, hour=NOW_HOUR))


@pytest.fixture
def movie() -> Movie:
    return Movie.create(
        name='Casablanca',
        genre='Drama',
        year=1942,
        director='Michael Curtiz',
        actors=['Humphrey Bogart', 'Ingrid Bergman'],
    )


@pytest.fixture
def tomorrow() -> date:
    return NOW_DATE + timedelta(days=1)
