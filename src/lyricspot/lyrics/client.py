"""Async client for the LRCLIB lyrics search endpoint."""

from __future__ import annotations

import asyncio

import httpx
from rich.markup import escape

from lyricspot.core.config import LrclibConfig
from lyricspot.core.models import LyricsCandidate, SearchQuery
from lyricspot.utils.console import console


class LrclibClient:
    """Best-effort search against LRCLIB.

    A failed query (network error, non-OK status, bad JSON) yields an empty
    result for that query only; nothing here raises for upstream trouble.

    Use as an async context manager, or pass an existing httpx.AsyncClient.
    """

    def __init__(
        self,
        config: LrclibConfig | None = None,
        http: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or LrclibConfig()
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> LrclibClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def search(self, query: SearchQuery) -> list[LyricsCandidate]:
        """Run one search query. Returns candidates in endpoint order."""
        params = query.params()
        if not params:
            return []

        try:
            response = await self.http.get(self.config.search_url, params=params)
            if not response.is_success:
                console.print(
                    f"[yellow]Lyrics search failed ({response.status_code}):[/yellow] "
                    f"{escape(query.describe())}"
                )
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            console.print(
                f"[yellow]Lyrics search failed:[/yellow] {escape(query.describe())} "
                f"({escape(str(e))})"
            )
            return []

        if not isinstance(data, list):
            return []

        candidates = []
        for record in data:
            if not isinstance(record, dict) or not isinstance(record.get("id"), int):
                continue
            candidates.append(LyricsCandidate.from_api(record))
        return candidates

    async def search_many(self, queries: list[SearchQuery]) -> list[list[LyricsCandidate]]:
        """Run several queries, returning one result list per query in query order.

        Queries go out concurrently unless the config asks for sequential requests;
        either way the returned order follows the input order.
        """
        if self.config.concurrent:
            return list(await asyncio.gather(*(self.search(q) for q in queries)))

        results = []
        for query in queries:
            results.append(await self.search(query))
        return results
