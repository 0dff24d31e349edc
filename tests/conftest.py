"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from lyricspot.core.config import LrclibConfig
from lyricspot.lyrics.client import LrclibClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SYNCED = "[00:01.00] First line\n[00:04.50] Second line\n[00:09.00] Third line"


def make_record(
    id: int,
    synced: str | None = None,
    plain: str | None = None,
    instrumental: bool = False,
    duration: float = 200,
    track: str = "Track",
    artist: str = "Artist",
) -> dict:
    """Build a search-endpoint JSON record."""
    return {
        "id": id,
        "trackName": track,
        "artistName": artist,
        "albumName": "Album",
        "duration": duration,
        "instrumental": instrumental,
        "plainLyrics": plain,
        "syncedLyrics": synced,
    }


def make_client(handler: Callable, **config: object) -> LrclibClient:
    """LrclibClient whose requests are answered by handler(request)."""
    return LrclibClient(LrclibConfig(**config), transport=httpx.MockTransport(handler))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_lrc(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample.lrc"
