"""Time utilities for chat-facing timestamps."""

from __future__ import annotations

from datetime import datetime

from hnbot.config import DEFAULT_DATE_FORMAT


def format_posted(moment: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Render ``moment`` in its own timezone, e.g. ``Thu, Jan  1 at 00:00``.

    ``{day}`` in the pattern is replaced by the day of month padded with a
    leading space to two characters, which strftime cannot do portably.
    """

    pattern = date_format.replace("{day}", f"{moment.day:>2}")
    return moment.strftime(pattern)


__all__ = ["format_posted"]
