"""
Cinema Service bootstrap

Wires the container, makes sure the tables exist and disposes the engine on
exit. Front ends (desktop UI, scripts) run inside ``lifespan()``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from src.platform.config.di import Container, container
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app_container: Container = container) -> AsyncIterator[Container]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Cinema Service] Starting up...')
    app_container.config_service()

    database = app_container.database()
    await database.create_tables()
    Logger.base.info('🗄️  [Cinema Service] Database ready')

    try:
        yield app_container
    finally:
        Logger.base.info('🛑 [Cinema Service] Shutting down...')
        await database.dispose()
        app_container.reset_singletons()
        Logger.base.info('👋 [Cinema Service] Shutdown complete')
