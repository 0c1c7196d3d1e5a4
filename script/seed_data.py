#!/usr/bin/env python3
"""
Database Seed Script
Populate sample data into the cinema database

Features:
1. Create Movies - a small catalogue
2. Schedule Screenings - evening slots over the next days, one movie per slot
3. Create Bookings - a few bookings for the demo customer

Notes:
- Run `python script/reset_database.py` first for a clean database
- Everything goes through the use cases, so slot conflicts are still rejected
"""

import asyncio
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List

from src.platform.exception.exceptions import CustomBaseError
from src.service.cinema.main import lifespan


DEMO_USERNAME = 'demo'
DAYS_AHEAD = 3
EVENING_HOURS = (17, 19, 21)


@dataclass
class MovieConfig:
    """Movie seed configuration"""

    name: str
    genre: str
    year: int
    director: str
    description: str = ''
    actors: List[str] = field(default_factory=list)


SAMPLE_MOVIES = [
    MovieConfig(
        name='Casablanca',
        genre='Drama',
        year=1942,
        director='Michael Curtiz',
        actors=['Humphrey Bogart', 'Ingrid Bergman'],
    ),
    MovieConfig(
        name='Metropolis',
        genre='Science Fiction',
        year=1927,
        director='Fritz Lang',
        actors=['Brigitte Helm'],
    ),
    MovieConfig(
        name='Singin\' in the Rain',
        genre='Musical',
        year=1952,
        director='Stanley Donen',
        actors=['Gene Kelly', 'Debbie Reynolds'],
    ),
]


async def create_movies(container) -> list:
    print(f'🎞️ Creating {len(SAMPLE_MOVIES)} movies...')
    add_movie = container.add_movie_use_case()
    movies = []
    for config in SAMPLE_MOVIES:
        movie = await add_movie.execute(
            name=config.name,
            description=config.description,
            genre=config.genre,
            year=config.year,
            director=config.director,
            actors=config.actors,
        )
        print(f'   ✅ Created movie: ID={movie.id}, Name={movie.name}')
        movies.append(movie)
    return movies


async def schedule_screenings(container, movies: list) -> list:
    print('📅 Scheduling screenings...')
    schedule = container.schedule_screening_use_case()
    today = container.clock().now().date
    screenings = []

    for day in range(1, DAYS_AHEAD + 1):
        for index, hour in enumerate(EVENING_HOURS):
            movie = movies[(day + index) % len(movies)]
            try:
                screening = await schedule.execute(
                    movie_id=movie.id, date=today + timedelta(days=day), hour=hour
                )
            except CustomBaseError as e:
                print(f'   ⚠️ Skipped {movie.name}: {e.message}')
                continue
            print(f'   ✅ {movie.name} at {screening.slot}')
            screenings.append(screening)
    return screenings


async def create_bookings(container, screenings: list) -> None:
    print(f'🎟️ Creating bookings for {DEMO_USERNAME}...')
    reserve = container.reserve_seats_use_case()
    for screening, seats in zip(screenings, (['A1', 'A2'], ['C5'], ['E9', 'E10'])):
        booking = await reserve.execute(
            screening_id=screening.id, username=DEMO_USERNAME, seats=seats
        )
        print(f'   ✅ Booking {booking.id}: {booking.formatted_seat_list}')


async def verify_data(container) -> None:
    print('🔍 Verifying seeded data...')
    listings = await container.list_upcoming_screenings_use_case().execute()
    for listing in listings:
        print(
            f'      {listing.screening.slot} {listing.movie_name}: '
            f'{listing.available_seats}/{listing.screening.total_seats} free'
        )
    print('   ✅ Data verification completed!')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        async with lifespan() as container:
            movies = await create_movies(container)
            print()
            screenings = await schedule_screenings(container, movies)
            print()
            await create_bookings(container, screenings)
            print()
            await verify_data(container)

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print(f'📋 Demo customer: {DEMO_USERNAME}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
