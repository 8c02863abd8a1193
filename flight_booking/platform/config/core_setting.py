from pathlib import Path
from typing import Optional

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')

_SUPPORTED_ISOLATION_LEVELS = (
    'SERIALIZABLE',
    'REPEATABLE READ',
    'READ COMMITTED',
    'READ UNCOMMITTED',
)
# SQLite only distinguishes serializable from dirty reads
_SQLITE_ISOLATION_LEVELS = ('SERIALIZABLE', 'READ UNCOMMITTED')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Flight Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'flight_booking'
    DATABASE_URL: Optional[str] = None  # Overrides the POSTGRES_* settings when set
    DB_ECHO: bool = False

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Booking rules
    MAX_FLIGHT_BOOKINGS: int = 3
    BOOKING_ISOLATION_LEVEL: str = 'SERIALIZABLE'

    # Flight search
    SEARCH_RESULT_LIMIT: int = 99

    @field_validator('MAX_FLIGHT_BOOKINGS')
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_FLIGHT_BOOKINGS must be at least 1')
        return v

    @field_validator('BOOKING_ISOLATION_LEVEL', mode='before')
    @classmethod
    def normalize_isolation_level(cls, v: str) -> str:
        level = ' '.join(str(v).replace('_', ' ').split()).upper()
        if level not in _SUPPORTED_ISOLATION_LEVELS:
            raise ValueError(
                f'BOOKING_ISOLATION_LEVEL must be one of: {", ".join(_SUPPORTED_ISOLATION_LEVELS)}'
            )
        return level

    @field_validator('SEARCH_RESULT_LIMIT')
    @classmethod
    def validate_search_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError('SEARCH_RESULT_LIMIT must be at least 1')
        return v

    @model_validator(mode='after')
    def validate_isolation_for_backend(self) -> 'Settings':
        backend = make_url(self.DATABASE_URL_ASYNC).get_backend_name()
        if backend == 'sqlite' and self.BOOKING_ISOLATION_LEVEL not in _SQLITE_ISOLATION_LEVELS:
            raise ValueError(
                f'BOOKING_ISOLATION_LEVEL {self.BOOKING_ISOLATION_LEVEL} is not supported by sqlite; '
                f'use one of: {", ".join(_SQLITE_ISOLATION_LEVELS)}'
            )
        return self


settings = Settings()  # type: ignore
