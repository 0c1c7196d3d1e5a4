from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from src.platform.config.core_setting import settings
from src.service.cinema.app.interface.i_clock import IClock
from src.service.cinema.domain.value_object.show_slot import ShowSlot


class SystemClock(IClock):
    """Wall clock in the cinema's timezone."""

    def __init__(self, *, timezone: Optional[str] = None) -> None:
        self.tz = ZoneInfo(timezone or settings.CINEMA_TIMEZONE)

    def now(self) -> ShowSlot:
        current = datetime.now(self.tz)
        return ShowSlot(date=current.date(), hour=current.hour)
