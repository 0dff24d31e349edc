"""Video title parsing and cleaning.

Music video titles carry a lot of noise around the actual song name:
"Artist - Track (Official Video)", "Track - Lyric Video | Album | Composer",
"Artist — Track [4K] ft. Someone". This module turns such a title into the
query variants used by the resolver:

- a structured artist/track guess,
- a lightly-cleaned title that keeps every word (safe for non-Latin scripts),
- a heavily-cleaned title with all brackets and marketing words removed.
"""

from __future__ import annotations

import re

from lyricspot.core.models import SearchQuery, TitleGuess

# Brackets are only dropped when they hold one of these words, so
# "(Remix)" or "(Live at Wembley)" survive the light clean.
_NOISE_WORDS = "official|video|audio|lyric|hd|4k|full|song|mv|from"
_NOISE_PAREN_RE = re.compile(rf"\(.*?({_NOISE_WORDS}).*?\)", re.IGNORECASE)
_NOISE_BRACKET_RE = re.compile(rf"\[.*?({_NOISE_WORDS}).*?\]", re.IGNORECASE)

# Pipes separate metadata chunks (album, actor, composer).
_PIPE_SUFFIX_RE = re.compile(r"\|.*")

_TRAILING_DASH_RE = re.compile(r"[-–—]\s*$")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")

# Tried in order; the first one that yields two parts wins.
_SEPARATORS = (" - ", " – ", " — ", " : ")

# "Lyric Video", "Official Audio", "Music" ... is not a track name.
_JUNK_TRACK_RE = re.compile(
    r"^(lyric|official|full|audio|video|music)\s*(video|audio|song|mv)?$", re.IGNORECASE
)

_ANY_PAREN_RE = re.compile(r"\(.*?\)")
_ANY_BRACKET_RE = re.compile(r"\[.*?\]")
_OFFICIAL_VIDEO_RE = re.compile(r"official\s*(music)?\s*video", re.IGNORECASE)
_LYRICS_WORD_RE = re.compile(r"\blyrics?\b", re.IGNORECASE)
_QUALITY_RE = re.compile(r"\bhd\b|\b4k\b|\bfull\s*video\b", re.IGNORECASE)
_FEAT_RE = re.compile(r"\b(?:ft|feat)\.?\s*", re.IGNORECASE)


def _strip_noise(title: str) -> str:
    """Drop noise brackets and everything after the first pipe."""
    cleaned = _NOISE_PAREN_RE.sub("", title)
    cleaned = _NOISE_BRACKET_RE.sub("", cleaned)
    return _PIPE_SUFFIX_RE.sub("", cleaned)


def parse_video_title(title: str) -> TitleGuess:
    """Guess artist and track from a video title.

    Examples:
        "Artist - Track (Official Video)"            -> ("Artist", "Track")
        "Jab Tu Sajan - Lyric Video | Aap Jaisa Koi" -> (None, "Jab Tu Sajan")
        "NoSeparatorTitle"                           -> (None, None)
    """
    cleaned = _strip_noise(title).strip()
    if not cleaned:
        return TitleGuess()

    for sep in _SEPARATORS:
        if sep not in cleaned:
            continue
        parts = [p.strip() for p in cleaned.split(sep)]
        parts = [p for p in parts if p]
        if len(parts) < 2:
            continue
        if _JUNK_TRACK_RE.match(parts[1]):
            return TitleGuess(artist=None, track=parts[0])
        return TitleGuess(artist=parts[0], track=parts[1])

    return TitleGuess()


def light_clean(title: str) -> str:
    """Remove noise brackets and pipe-separated extras, keep every other word."""
    cleaned = _strip_noise(title)
    cleaned = _TRAILING_DASH_RE.sub("", cleaned)
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


def heavy_clean(title: str) -> str:
    """Aggressively strip brackets, marketing words and featured-artist markers."""
    cleaned = _ANY_PAREN_RE.sub("", title)
    cleaned = _ANY_BRACKET_RE.sub("", cleaned)
    cleaned = _PIPE_SUFFIX_RE.sub("", cleaned)
    cleaned = _OFFICIAL_VIDEO_RE.sub("", cleaned)
    cleaned = _LYRICS_WORD_RE.sub("", cleaned)
    cleaned = _QUALITY_RE.sub("", cleaned)
    cleaned = _FEAT_RE.sub("", cleaned)
    cleaned = _TRAILING_DASH_RE.sub("", cleaned)
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned)
    return cleaned.strip()


def build_queries(title: str) -> list[SearchQuery]:
    """Build the search queries for a title, in strategy order.

    1. structured: artist + track, or track alone, from parse_video_title
    2. light: the lightly-cleaned title as free text
    3. heavy: the heavily-cleaned title, only when it differs from light
    """
    queries: list[SearchQuery] = []

    guess = parse_video_title(title)
    if guess.artist and guess.track:
        queries.append(SearchQuery(artist=guess.artist, track=guess.track, strategy="structured"))
    elif guess.track:
        queries.append(SearchQuery(track=guess.track, strategy="structured"))

    light = light_clean(title)
    if light:
        queries.append(SearchQuery(free_text=light, strategy="light"))

    heavy = heavy_clean(title)
    if heavy and heavy != light:
        queries.append(SearchQuery(free_text=heavy, strategy="heavy"))

    return queries
