from enum import StrEnum


class ScreeningOrder(StrEnum):
    START_TIME = 'start_time'
    TITLE = 'title'
