"""
Integration fixtures: a real SQLAlchemy engine on a temporary SQLite file.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork, UnitOfWorkFactory


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    database = Database(url=f'sqlite+aiosqlite:///{tmp_path / "cinema_test.db"}', echo=False)
    await database.create_tables()
    yield database
    await database.dispose()


@pytest.fixture
def sql_uow_factory(database: Database) -> UnitOfWorkFactory:
    return lambda: SqlAlchemyUnitOfWork(database.session_maker)
