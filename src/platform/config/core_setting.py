from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seating Chart'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables call tracing and the file log sink

    # Seating chart dimensions
    SEATING_ROWS: int = 3
    SEATING_COLS: int = 11
    MAX_SEAT_REQUEST: int = 10  # Largest block a single request may ask for

    # Batch output rendering
    NOT_ENOUGH_SEATS_MESSAGE: str = 'Not enough seats'
    SEAT_RANGE_SEPARATOR: str = ' - '

    @field_validator('SEATING_ROWS', 'SEATING_COLS', 'MAX_SEAT_REQUEST')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be a positive integer')
        return v


settings = Settings()  # type: ignore
