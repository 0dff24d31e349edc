"""Shared data models for lyricspot."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TitleGuess:
    """Artist/track pair guessed from a video title. Either side may be missing."""

    artist: str | None = None
    track: str | None = None


@dataclass(frozen=True)
class SearchQuery:
    """One request to the lyrics search endpoint.

    Exactly one shape is used: artist + track, track only, or free text.
    """

    artist: str | None = None
    track: str | None = None
    free_text: str | None = None
    strategy: str = ""  # "structured", "light" or "heavy"

    def params(self) -> dict[str, str]:
        """Query-string parameters for the search endpoint."""
        if self.free_text is not None:
            return {"q": self.free_text}
        params = {}
        if self.artist:
            params["artist_name"] = self.artist
        if self.track:
            params["track_name"] = self.track
        return params

    def describe(self) -> str:
        if self.free_text is not None:
            return f'q="{self.free_text}"'
        if self.artist:
            return f'artist="{self.artist}" track="{self.track}"'
        return f'track="{self.track}"'


@dataclass(frozen=True)
class LyricsCandidate:
    """A lyrics record returned by the search endpoint."""

    id: int
    track_name: str = ""
    artist_name: str = ""
    plain_lyrics: str | None = None
    synced_lyrics: str | None = None
    instrumental: bool = False
    duration: int = 0  # seconds

    @classmethod
    def from_api(cls, record: dict) -> LyricsCandidate:
        """Build a candidate from one JSON record of the search response."""
        duration = record.get("duration") or 0
        try:
            duration = int(round(float(duration)))
        except (TypeError, ValueError):
            duration = 0
        return cls(
            id=int(record["id"]),
            track_name=record.get("trackName") or "",
            artist_name=record.get("artistName") or "",
            plain_lyrics=record.get("plainLyrics"),
            synced_lyrics=record.get("syncedLyrics"),
            instrumental=bool(record.get("instrumental", False)),
            duration=duration,
        )


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: LyricsCandidate
    score: int


@dataclass(frozen=True)
class LyricLine:
    """A single synced lyric line."""

    time: float  # seconds
    text: str


@dataclass(frozen=True)
class ActiveLineState:
    """Active line for a playback time. index is -1 before the first line."""

    index: int = -1
    duration: float = 0.0  # seconds the active line stays on screen

    @property
    def is_active(self) -> bool:
        return self.index >= 0


@dataclass
class LyricsResult:
    """Outcome of one resolution attempt."""

    plain: str | None = None
    synced: list[LyricLine] = field(default_factory=list)
    candidate: LyricsCandidate | None = None

    @property
    def found(self) -> bool:
        return bool(self.plain) or bool(self.synced)

    @property
    def has_synced(self) -> bool:
        return bool(self.synced)
