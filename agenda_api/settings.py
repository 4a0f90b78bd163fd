from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agenda.constants import DEFAULT_CALENDAR_WINDOW_DAYS, DEFAULT_LOCALE, DEFAULT_LOOKAHEAD_DAYS


class Settings(BaseSettings):
    calendar_timezone: str = Field("America/Mexico_City", alias="CALENDAR_TIMEZONE")

    lookahead_days: int = Field(DEFAULT_LOOKAHEAD_DAYS, alias="UPCOMING_LOOKAHEAD_DAYS")
    calendar_window_days: int = Field(DEFAULT_CALENDAR_WINDOW_DAYS, alias="CALENDAR_WINDOW_DAYS")
    max_window_days: int = Field(366, alias="MAX_WINDOW_DAYS")

    label_locale: str = Field(DEFAULT_LOCALE, alias="LABEL_LOCALE")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def today(self) -> date:
        try:
            return datetime.now(ZoneInfo(self.calendar_timezone)).date()
        except (ZoneInfoNotFoundError, ValueError):
            return date.today()


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
