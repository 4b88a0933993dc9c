"""Value objects returned by the Hacker News search API."""

from __future__ import annotations

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator


class Story(BaseModel):
    """One hit of a Hacker News search."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(min_length=1)
    url: str = ""
    created_at: AwareDatetime

    @field_validator("url", mode="before")
    @classmethod
    def _null_url_to_empty(cls, value):
        # Self posts (Ask HN etc.) come back with "url": null.
        if value is None:
            return ""
        return value


class SearchResults(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    hits: tuple[Story, ...] = ()


__all__ = ["SearchResults", "Story"]
