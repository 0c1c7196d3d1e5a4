from pathlib import Path
import string

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')

# Rows are lettered A..Z
MAX_SEAT_ROWS = len(string.ascii_uppercase)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database (a local SQLite file for the desktop build)
    DATABASE_URL_ASYNC: str = f'sqlite+aiosqlite:///{_PROJECT_ROOT / "cinema.db"}'
    DB_ECHO: bool = False

    # Cinema room layout - one shared room
    SEAT_COUNT: int = 50
    SEATS_PER_ROW: int = 10

    # Pricing
    SEAT_PRICE: int = 8
    CURRENCY_SYMBOL: str = '£'

    # Wall clock used for the "past screening" rule
    CINEMA_TIMEZONE: str = 'Europe/London'

    # Report export
    EXPORT_FILENAME: str = 'Exported_Screenings.csv'

    @field_validator('SEATS_PER_ROW')
    @classmethod
    def validate_seats_per_row(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('SEATS_PER_ROW must be positive')
        return v

    @field_validator('SEAT_COUNT')
    @classmethod
    def validate_seat_count(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('SEAT_COUNT must be positive')
        return v

    @model_validator(mode='after')
    def validate_layout_fits_rows(self) -> 'Settings':
        rows = -(-self.SEAT_COUNT // self.SEATS_PER_ROW)
        if rows > MAX_SEAT_ROWS:
            raise ValueError(
                f'SEAT_COUNT={self.SEAT_COUNT} with SEATS_PER_ROW={self.SEATS_PER_ROW} '
                f'needs {rows} rows, at most {MAX_SEAT_ROWS} are supported'
            )
        return self


settings = Settings()  # type: ignore
