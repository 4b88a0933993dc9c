"""Client for the public Hacker News search API (hn.algolia.com)."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
from pydantic import ValidationError

from hnbot.config import HackerNewsSettings
from hnbot.domain.models import SearchResults
from hnbot.logging import get_logger
from hnbot.services.exceptions import (
    DecodeError,
    EmptyResponseError,
    RequestBuildError,
    ResponseStatusError,
    SearchError,
    TransportError,
)

ERROR_DETAIL_CHAR_LIMIT = 500


class HackerNewsClient:
    """Search Hacker News stories through its JSON REST endpoint.

    The client keeps no per-call state, so one instance (and the shared
    ``httpx.AsyncClient`` behind it) can serve concurrent searches. Each call
    issues exactly one request; nothing is retried.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: HackerNewsSettings | None = None,
        logger: Any = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or HackerNewsSettings()
        self._logger = logger if logger is not None else get_logger("hackernews")

    async def search(self, query: str) -> SearchResults:
        """Return the stories matching ``query``, newest first.

        The query is sent verbatim (URL-escaped); callers filter out empty
        queries themselves. The whole exchange, body included, is bounded by
        ``request_timeout_seconds``. Cancelling the awaiting task aborts the
        request and propagates ``asyncio.CancelledError``.
        """

        try:
            request = self._build_request(query)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise self._fail(
                RequestBuildError(f"could not initialize search api request: {query}"),
                exc,
                query=query,
            ) from exc

        timeout = self._settings.request_timeout_seconds
        try:
            async with asyncio.timeout(timeout):
                response = await self._client.send(request)
        except (httpx.TimeoutException, TimeoutError) as exc:
            raise self._fail(
                TransportError(f"search timed out after {timeout}s: {query}"),
                exc,
                query=query,
            ) from exc
        except httpx.RequestError as exc:
            raise self._fail(
                TransportError(f"could not search query: {query}"),
                exc,
                query=query,
            ) from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = response.text[:ERROR_DETAIL_CHAR_LIMIT]
            raise self._fail(
                ResponseStatusError(
                    f"search api responded {response.status_code}: {detail}",
                    status_code=response.status_code,
                ),
                exc,
                query=query,
            ) from exc

        return self._decode(response, query)

    def _build_request(self, query: str) -> httpx.Request:
        params = {"query": query, "tags": self._settings.tags}
        return self._client.build_request(
            "GET",
            str(self._settings.api_url),
            params=params,
            timeout=self._settings.request_timeout_seconds,
        )

    def _decode(self, response: httpx.Response, query: str) -> SearchResults:
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise self._fail(
                DecodeError("could not parse response body"), exc, query=query
            ) from exc

        if payload is None:
            raise self._fail(EmptyResponseError("empty response"), None, query=query)

        try:
            results = SearchResults.model_validate(payload)
        except ValidationError as exc:
            raise self._fail(
                DecodeError("could not unmarshal search results"), exc, query=query
            ) from exc

        self._logger.debug("hackernews_search_completed", query=query, hits=len(results.hits))
        return results

    def _fail(self, error: SearchError, cause: Exception | None, *, query: str) -> SearchError:
        self._logger.warning(
            "hackernews_search_failed",
            query=query,
            error_type=error.__class__.__name__,
            error=str(error),
            cause=str(cause) if cause is not None else None,
        )
        return error


__all__ = ["HackerNewsClient"]
