"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATE_FORMAT = "%a, %b {day} at %H:%M"


class HackerNewsSettings(BaseModel):
    api_url: HttpUrl = Field(
        default="https://hn.algolia.com/api/v1/search_by_date",
        description="Algolia search endpoint, newest first.",
    )
    tags: str = Field(default="story", min_length=1)
    request_timeout_seconds: float = Field(default=1.0, gt=0, le=60)


class MessageSettings(BaseModel):
    max_length: int = Field(default=2000, ge=1)
    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        description="strftime pattern; {day} is the space-padded day of month.",
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HNBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"

    hackernews: HackerNewsSettings = Field(default_factory=HackerNewsSettings)
    messages: MessageSettings = Field(default_factory=MessageSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "HackerNewsSettings",
    "MessageSettings",
    "Settings",
    "get_settings",
]
