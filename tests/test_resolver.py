"""Tests for candidate ranking and the multi-strategy resolver."""

import asyncio

import httpx
import pytest

from conftest import SYNCED, make_client, make_record
from lyricspot.core.config import ScoringConfig
from lyricspot.core.models import LyricLine, LyricsCandidate
from lyricspot.lyrics.resolver import (
    dedupe_candidates,
    drop_instrumentals,
    rank_candidates,
    resolve,
    score_candidate,
    search_candidates,
    select_lyrics,
)


def _candidate(id: int, **kwargs) -> LyricsCandidate:
    return LyricsCandidate.from_api(make_record(id, **kwargs))


class TestScoring:
    def test_synced_plain_and_close_duration(self):
        c = _candidate(1, synced=SYNCED, plain="x", duration=200)
        assert score_candidate(c, 202) == 10 + 5 + 1

    @pytest.mark.parametrize(
        "video_duration, expected",
        [(200, 5), (203.9, 5), (204, 2), (214.9, 2), (215, 0), (185.5, 2), (150, 0)],
    )
    def test_duration_bands(self, video_duration, expected):
        c = _candidate(1, duration=200)
        assert score_candidate(c, video_duration) == expected

    @pytest.mark.parametrize("video_duration", [None, 0, -10])
    def test_duration_ignored_when_unknown(self, video_duration):
        c = _candidate(1, synced=SYNCED, duration=0)
        assert score_candidate(c, video_duration) == 10

    def test_empty_strings_do_not_count(self):
        c = _candidate(1, synced="", plain="")
        assert score_candidate(c) == 0

    def test_custom_weights(self):
        c = _candidate(1, synced=SYNCED, plain="x")
        assert score_candidate(c, scoring=ScoringConfig(synced_bonus=3, plain_bonus=2)) == 5


class TestPool:
    def test_dedupe_keeps_first(self):
        pool = [_candidate(1, track="first"), _candidate(2), _candidate(1, track="second")]
        unique = dedupe_candidates(pool)
        assert [c.id for c in unique] == [1, 2]
        assert unique[0].track_name == "first"

    def test_drop_instrumentals(self):
        pool = [_candidate(1, instrumental=True), _candidate(2)]
        assert [c.id for c in drop_instrumentals(pool)] == [2]

    def test_dedupe_runs_before_instrumental_filter(self):
        """The first occurrence of an id decides, even if it is instrumental."""
        pool = [_candidate(1, instrumental=True), _candidate(1, plain="words")]
        assert rank_candidates(pool) == []

    def test_rank_is_stable_for_ties(self):
        pool = [_candidate(3, plain="a"), _candidate(1, plain="b"), _candidate(2, plain="c")]
        assert [s.candidate.id for s in rank_candidates(pool)] == [3, 1, 2]

    def test_rank_orders_by_score(self):
        pool = [_candidate(1, plain="p"), _candidate(2, synced=SYNCED), _candidate(3)]
        ranked = rank_candidates(pool)
        assert [(s.candidate.id, s.score) for s in ranked] == [(2, 10), (1, 1), (3, 0)]


class TestSelectLyrics:
    def test_synced_beats_closer_plain(self):
        pool = [
            _candidate(1, synced=None, plain="x", duration=200),
            _candidate(2, synced="[00:01.00] hi", plain=None, duration=199),
        ]
        result = select_lyrics(pool, video_duration=200)
        assert result.candidate.id == 2
        assert result.plain is None
        assert result.synced == [LyricLine(time=1.0, text="hi")]

    def test_all_instrumental(self):
        pool = [_candidate(1, instrumental=True), _candidate(2, instrumental=True)]
        result = select_lyrics(pool)
        assert result.plain is None
        assert result.synced == []
        assert result.candidate is None

    def test_empty_pool(self):
        result = select_lyrics([])
        assert not result.found
        assert result.candidate is None

    def test_unparseable_synced_falls_back_to_plain(self):
        result = select_lyrics([_candidate(1, synced="no timestamps here", plain="plain words")])
        assert result.synced == []
        assert result.plain == "plain words"
        assert result.found


TITLE = "Daft Punk - Get Lucky ft. Pharrell Williams (Official Video)"
LIGHT = "Daft Punk - Get Lucky ft. Pharrell Williams"
HEAVY = "Daft Punk - Get Lucky Pharrell Williams"


def _router(structured=(), light=(), heavy=(), log=None):
    """Answer each strategy's query with its own records."""

    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        if log is not None:
            log.append(dict(params))
        if "artist_name" in params or "track_name" in params:
            body = structured
        elif params.get("q") == LIGHT:
            body = light
        elif params.get("q") == HEAVY:
            body = heavy
        else:
            body = []
        if isinstance(body, Exception):
            raise body
        return httpx.Response(200, json=list(body))

    return handler


def _resolve(handler, duration=None, **config):
    async def run():
        async with make_client(handler, **config) as client:
            return await resolve(TITLE, duration, client=client)

    return asyncio.run(run())


class TestResolve:
    def test_issues_all_three_strategies(self):
        log: list[dict] = []
        _resolve(_router(log=log))
        assert len(log) == 3
        assert {"artist_name": "Daft Punk", "track_name": "Get Lucky ft. Pharrell Williams"} in log
        assert {"q": LIGHT} in log
        assert {"q": HEAVY} in log

    def test_tie_goes_to_earliest_strategy(self):
        handler = _router(
            structured=[make_record(10, synced=SYNCED)],
            light=[make_record(20, synced=SYNCED)],
            heavy=[make_record(30, synced=SYNCED)],
        )
        assert _resolve(handler).candidate.id == 10

    def test_later_strategy_can_win(self):
        handler = _router(
            structured=[make_record(10, plain="only plain")],
            light=[make_record(20, plain="also plain")],
            heavy=[make_record(30, synced=SYNCED, plain="both")],
        )
        result = _resolve(handler)
        assert result.candidate.id == 30
        assert result.plain == "both"
        assert [line.text for line in result.synced] == ["First line", "Second line", "Third line"]

    def test_duration_breaks_ties(self):
        handler = _router(
            structured=[make_record(10, synced=SYNCED, duration=300)],
            light=[make_record(20, synced=SYNCED, duration=249)],
        )
        assert _resolve(handler, duration=248).candidate.id == 20

    def test_duplicates_across_strategies(self):
        handler = _router(
            structured=[make_record(10, synced=SYNCED, track="from structured")],
            light=[make_record(10, synced=SYNCED, track="from light")],
        )
        assert _resolve(handler).candidate.track_name == "from structured"

    def test_failed_query_does_not_abort_others(self):
        handler = _router(
            structured=httpx.ConnectError("boom"),
            light=[make_record(20, plain="words")],
        )
        result = _resolve(handler)
        assert result.candidate.id == 20

    def test_all_queries_fail(self):
        def handler(request):
            return httpx.Response(503)

        result = _resolve(handler)
        assert result.candidate is None
        assert result.synced == []

    def test_sequential_mode_keeps_strategy_order(self):
        log: list[dict] = []
        handler = _router(
            structured=[make_record(10, plain="a")],
            light=[make_record(20, plain="b")],
            log=log,
        )
        result = _resolve(handler, concurrent=False)
        assert result.candidate.id == 10
        assert [next(iter(p)) for p in log] == ["artist_name", "q", "q"]

    def test_untitled_makes_no_requests(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=[])

        async def run():
            async with make_client(handler) as client:
                return await resolve("(Official Video)", client=client)

        result = asyncio.run(run())
        assert calls == []
        assert result.candidate is None


def test_search_candidates_returns_ranking():
    handler = _router(
        structured=[make_record(10, plain="a")],
        light=[make_record(20, synced=SYNCED), make_record(21, instrumental=True)],
    )

    async def run():
        async with make_client(handler) as client:
            return await search_candidates(TITLE, client=client)

    ranked = asyncio.run(run())
    assert [s.candidate.id for s in ranked] == [20, 10]
