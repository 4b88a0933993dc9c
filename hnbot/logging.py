"""Structured logging with a per-component ``prefix`` field."""

from __future__ import annotations

import logging
from typing import Any, TextIO

import structlog


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO, *, stream: TextIO | None = None) -> None:
    """Render every event as one JSON line on ``stream`` (stdout by default)."""

    level = _resolve_level(level)
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=stream is None,
    )


def get_logger(prefix: str, **initial_values: Any) -> Any:
    """Return a lazy logger whose events carry ``prefix``, like ``hackernews`` or ``main``."""

    return structlog.get_logger(prefix=prefix, **initial_values)


__all__ = ["configure_logging", "get_logger"]
