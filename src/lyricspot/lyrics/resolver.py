"""Resolve a video title to the best matching lyrics record.

Search order:
 1. Artist + track (structured guess from the title)
 2. Lightly-cleaned title (keeps non-English scripts intact)
 3. Heavily-cleaned title (fallback)

All strategies run and their results are pooled before ranking, since the
best candidate can come from any of them. Duration is only a soft preference,
never a filter: "Lyric Video" or "Full Video" uploads often run longer or
shorter than the album version stored upstream.
"""

from __future__ import annotations

import asyncio

from rich.markup import escape

from lyricspot.core.config import LrclibConfig, ScoringConfig
from lyricspot.core.models import LyricsCandidate, LyricsResult, ScoredCandidate, SearchQuery
from lyricspot.lyrics.client import LrclibClient
from lyricspot.lyrics.lrc import parse_synced_lyrics
from lyricspot.lyrics.title import build_queries
from lyricspot.utils.console import console


def dedupe_candidates(pool: list[LyricsCandidate]) -> list[LyricsCandidate]:
    """Drop repeated ids, keeping the first occurrence."""
    seen: set[int] = set()
    unique = []
    for candidate in pool:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        unique.append(candidate)
    return unique


def drop_instrumentals(pool: list[LyricsCandidate]) -> list[LyricsCandidate]:
    return [c for c in pool if not c.instrumental]


def score_candidate(
    candidate: LyricsCandidate,
    video_duration: float | None = None,
    scoring: ScoringConfig | None = None,
) -> int:
    """Score a candidate, higher is better.

    +10 synced lyrics, +5 duration within 4s (or +2 within 15s) of the video,
    +1 plain lyrics. Duration only counts when the video duration is positive.
    """
    scoring = scoring or ScoringConfig()
    score = 0

    if candidate.synced_lyrics:
        score += scoring.synced_bonus

    if video_duration and video_duration > 0:
        diff = abs(candidate.duration - video_duration)
        if diff < scoring.close_duration:
            score += scoring.close_bonus
        elif diff < scoring.near_duration:
            score += scoring.near_bonus

    if candidate.plain_lyrics:
        score += scoring.plain_bonus

    return score


def rank_candidates(
    pool: list[LyricsCandidate],
    video_duration: float | None = None,
    scoring: ScoringConfig | None = None,
) -> list[ScoredCandidate]:
    """Dedupe, drop instrumentals, and sort by score descending.

    Ties keep pool order (sorted() is stable), so the earlier strategy wins.
    """
    candidates = drop_instrumentals(dedupe_candidates(pool))
    scored = [ScoredCandidate(c, score_candidate(c, video_duration, scoring)) for c in candidates]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def select_lyrics(
    pool: list[LyricsCandidate],
    video_duration: float | None = None,
    scoring: ScoringConfig | None = None,
) -> LyricsResult:
    """Pick the best candidate from a pool and parse its synced lyrics."""
    ranked = rank_candidates(pool, video_duration, scoring)
    if not ranked:
        return LyricsResult()

    best = ranked[0].candidate
    synced = parse_synced_lyrics(best.synced_lyrics) if best.synced_lyrics else []
    return LyricsResult(plain=best.plain_lyrics or None, synced=synced, candidate=best)


async def gather_pool(
    queries: list[SearchQuery],
    client: LrclibClient,
) -> list[LyricsCandidate]:
    """Run every query and flatten the results in strategy order."""
    results = await client.search_many(queries)
    pool: list[LyricsCandidate] = []
    for query, candidates in zip(queries, results):
        console.print(
            f"[dim]{query.strategy or 'query'}: {escape(query.describe())} -> "
            f"{len(candidates)} result(s)[/dim]"
        )
        pool.extend(candidates)
    return pool


async def collect_pool(
    video_title: str,
    client: LrclibClient | None = None,
    config: LrclibConfig | None = None,
) -> list[LyricsCandidate]:
    """Run every strategy for a title and pool the results in strategy order."""
    queries = build_queries(video_title)
    if not queries:
        return []

    if client is not None:
        return await gather_pool(queries, client)
    async with LrclibClient(config) as own_client:
        return await gather_pool(queries, own_client)


async def search_candidates(
    video_title: str,
    video_duration: float | None = None,
    client: LrclibClient | None = None,
    config: LrclibConfig | None = None,
    scoring: ScoringConfig | None = None,
) -> list[ScoredCandidate]:
    """Run all strategies for a title and return the ranked candidates."""
    pool = await collect_pool(video_title, client, config)
    return rank_candidates(pool, video_duration, scoring)


async def resolve(
    video_title: str,
    video_duration: float | None = None,
    client: LrclibClient | None = None,
    config: LrclibConfig | None = None,
    scoring: ScoringConfig | None = None,
) -> LyricsResult:
    """Find lyrics for a video title.

    Args:
        video_title: Raw video title, as shown by the video source.
        video_duration: Video length in seconds, used as a soft tiebreaker.
        client: Search client to reuse; a temporary one is opened otherwise.
        config: Endpoint settings for a temporary client.
        scoring: Score weights.

    Returns:
        LyricsResult; candidate is None when nothing usable was found.
    """
    pool = await collect_pool(video_title, client, config)
    result = select_lyrics(pool, video_duration, scoring)
    if result.candidate is not None and result.candidate.synced_lyrics and not result.synced:
        console.print("[yellow]Synced lyrics could not be parsed, using plain lyrics.[/yellow]")
    return result


def resolve_sync(
    video_title: str,
    video_duration: float | None = None,
    config: LrclibConfig | None = None,
    scoring: ScoringConfig | None = None,
) -> LyricsResult:
    """Blocking wrapper around resolve() for scripts and the CLI."""
    return asyncio.run(resolve(video_title, video_duration, config=config, scoring=scoring))
