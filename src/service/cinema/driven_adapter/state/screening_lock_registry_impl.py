"""
Screening Lock Registry (in-process)

One asyncio.Lock per key. Locks live in a WeakValueDictionary, so a lock
disappears once no holder or waiter references it.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator
import asyncio
import weakref

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_screening_lock import IScreeningLock


class ScreeningLockRegistryImpl(IScreeningLock):
    def __init__(self) -> None:
        self._locks: 'weakref.WeakValueDictionary[str, asyncio.Lock]' = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._lock_for(key)
        if lock.locked():
            Logger.base.debug(f'⏳ [LOCK] Waiting for {key}')
        async with lock:
            Logger.base.debug(f'🔒 [LOCK] Acquired {key}')
            try:
                yield
            finally:
                Logger.base.debug(f'🔓 [LOCK] Released {key}')

    def active_keys(self) -> list[str]:
        return sorted(self._locks.keys())
