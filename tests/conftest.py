"""Shared pytest fixtures for the search client tests."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

import httpx
import pytest
import structlog

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


class RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.events.append((level, event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record("error", event, **kwargs)

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return {
        "hits": [
            {
                "title": "Sample",
                "url": "a.com",
                "created_at": "1970-01-01T00:00:00Z",
                "objectID": "1",
                "points": 3,
            }
        ]
    }


@pytest.fixture
def mock_client_factory():
    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
