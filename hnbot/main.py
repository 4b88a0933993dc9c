"""Application entrypoint."""

from __future__ import annotations

import asyncio
import sys

import httpx
import typer

from hnbot.config import Settings, get_settings
from hnbot.logging import configure_logging, get_logger
from hnbot.services.exceptions import SearchError
from hnbot.services.hackernews import HackerNewsClient
from hnbot.utils.messages import compile_links, format_search_results

app = typer.Typer(no_args_is_help=True, help="Hacker News search for chat channels.")
logger = get_logger("main")


async def run_search(
    query: str,
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Search Hacker News and return the chat-ready text."""

    async def _search(client: httpx.AsyncClient) -> str:
        hn_client = HackerNewsClient(client, settings=settings.hackernews)
        results = await hn_client.search(query)
        return format_search_results(
            results,
            limit=settings.messages.max_length,
            date_format=settings.messages.date_format,
        )

    if http_client is not None:
        return await _search(http_client)
    async with httpx.AsyncClient() as client:
        return await _search(client)


@app.command()
def search(query: list[str] = typer.Argument(..., help="Search terms.")) -> None:
    """Search Hacker News stories and print them as a chat message."""

    settings = get_settings()
    configure_logging(settings.log_level)
    search_query = " ".join(query).strip()
    if not search_query:
        raise typer.BadParameter("query must not be empty")

    logger.info("hackernews_search_requested", query=search_query)
    try:
        text = asyncio.run(run_search(search_query, settings))
    except SearchError as exc:
        # Failures stay out of the channel; the log has the details.
        logger.error("hackernews_search_error", query=search_query, error=str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(text, nl=False)


@app.command()
def links() -> None:
    """Compile unique links from message texts read on stdin, one per line."""

    settings = get_settings()
    configure_logging(settings.log_level)
    texts = sys.stdin.read().splitlines()
    text = compile_links(texts, limit=settings.messages.max_length)
    logger.info("links_compiled", messages=len(texts))
    typer.echo(text, nl=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
