#!/usr/bin/env python3
"""
Database Reset Script
Reset the cinema database structure

Features:
1. Drop all tables - wipe movies, screenings and bookings
2. Create tables - the latest schema from the SQLAlchemy models

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python script/seed_data.py`
"""

import asyncio

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database


async def drop_and_recreate_tables(database: Database) -> None:
    print(f'Database URL: {database.url}')

    print('🗑️ Dropping tables...')
    await database.drop_tables()

    print('🏗️ Creating tables...')
    await database.create_tables()
    print('Database recreation completed!')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    database = Database(url=settings.DATABASE_URL_ASYNC)
    try:
        await drop_and_recreate_tables(database)
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
