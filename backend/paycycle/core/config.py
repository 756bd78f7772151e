from datetime import date
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:9002"
    LOG_LEVEL: str = "INFO"

    # Local wall clock used to assign punches to calendar days
    TIMEZONE: str = "America/New_York"

    # Bi-weekly cycle: a known period start (must be a Sunday)
    PAY_PERIOD_REFERENCE_START: date = date(2025, 8, 24)
    PAY_PERIOD_DAYS: int = 14
    # Weekday of the pay date (Mon=0 ... Sun=6); Thursday by default
    PAY_DATE_WEEKDAY: int = 3

    # Placeholder flat withholding on the check amount (no real tax tables)
    TAX_RATE: float = 0.15

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
