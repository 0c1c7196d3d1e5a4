from datetime import date

import attrs

from src.platform.exception.exceptions import DomainError


def _validate_hour(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not 0 <= value <= 23:
        raise DomainError(f'{attribute.name} must be between 0 and 23, got {value}')


@attrs.frozen(order=True)
class ShowSlot:
    """
    A start time in the single cinema room, at hour granularity.

    Also used as "now": the clock reports the current date and hour as a slot.
    """

    date: date
    hour: int = attrs.field(validator=_validate_hour)

    def is_past(self, now: 'ShowSlot') -> bool:
        """
        A slot is past once its start hour is reached.

        With now = (2025-06-01, 18) the 18:00 show is past and 19:00 is not.
        """
        return self <= now

    @property
    def formatted_time(self) -> str:
        return f'{self.hour:02d}:00'

    def __str__(self) -> str:
        return f'{self.date.isoformat()} {self.formatted_time}'
