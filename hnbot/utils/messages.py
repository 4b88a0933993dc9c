"""Plain-text rendering of search results and link digests for chat."""

from __future__ import annotations

import re
from typing import Iterable

from hnbot.config import DEFAULT_DATE_FORMAT
from hnbot.domain.models import SearchResults
from hnbot.utils.datetime import format_posted

# Discord rejects messages longer than 2000 characters.
MAX_MESSAGE_LENGTH = 2000
TOO_MANY_LINKS_NOTICE = "That's a lot of links (length over 2000 characters)"

LINK_RE = re.compile(r"https?://[^\s<>\"'`]+", re.IGNORECASE)
TRAILING_PUNCTUATION = ".,;:!?"


def truncate_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    if len(text) >= limit:
        return text[:limit]
    return text


def format_search_results(
    results: SearchResults | None,
    *,
    limit: int = MAX_MESSAGE_LENGTH,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """Render results as one chat message.

    Each story becomes a bold title line, an optional ``Link:`` line, a
    ``Posted:`` line and a blank separator. Output longer than ``limit`` is
    cut to exactly ``limit`` characters, possibly mid-line.
    """

    if results is None:
        return ""
    lines: list[str] = []
    for story in results.hits:
        lines.append(f"**{story.title}**\n")
        if story.url:
            lines.append(f"Link: {story.url}\n")
        lines.append(f"Posted: {format_posted(story.created_at, date_format)}\n")
        lines.append("\n")
    return truncate_message("".join(lines), limit)


def _trim_link(link: str) -> str:
    # Drop sentence punctuation and closing parens that have no opener in the link.
    while True:
        link = link.rstrip(TRAILING_PUNCTUATION)
        if link.endswith(")") and link.count(")") > link.count("("):
            link = link[:-1]
            continue
        return link


def extract_links(texts: Iterable[str]) -> list[str]:
    """Collect unique http(s) links from ``texts`` in first-seen order."""

    seen: dict[str, None] = {}
    for text in texts:
        if not text:
            continue
        for match in LINK_RE.findall(text):
            link = _trim_link(match)
            if link and link not in seen:
                seen[link] = None
    return list(seen)


def compile_links(texts: Iterable[str], *, limit: int = MAX_MESSAGE_LENGTH) -> str:
    compiled = "".join(f"{link}\n" for link in extract_links(texts))
    if len(compiled) > limit:
        return TOO_MANY_LINKS_NOTICE
    return compiled


__all__ = [
    "MAX_MESSAGE_LENGTH",
    "TOO_MANY_LINKS_NOTICE",
    "compile_links",
    "extract_links",
    "format_search_results",
    "truncate_message",
]
