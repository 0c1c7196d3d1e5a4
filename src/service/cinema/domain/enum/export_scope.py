from enum import StrEnum


class ExportScope(StrEnum):
    ALL = 'all'
    UPCOMING = 'upcoming'
    SELECTED = 'selected'
