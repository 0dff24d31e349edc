"""LRC synced-lyrics parsing and formatting."""

from __future__ import annotations

import re

from lyricspot.core.models import LyricLine

# [MM:SS.ss]: two-digit minutes, two-digit seconds, two fractional digits.
_LINE_RE = re.compile(r"^\[([0-9]{2}):([0-9]{2}\.[0-9]{2})\]\s*(.*)")


def parse_synced_lyrics(raw: str) -> list[LyricLine]:
    """Parse LRC text into timed lines.

    Lines without a leading [MM:SS.ss] tag (metadata headers, blank lines,
    other timestamp precisions) are skipped, as are tagged lines with no text.
    Input order is kept as-is; LRC from the search endpoint is chronological.
    """
    lines: list[LyricLine] = []
    for line in raw.split("\n"):
        match = _LINE_RE.match(line)
        if not match:
            continue
        text = match.group(3).strip()
        if not text:
            continue
        minutes = int(match.group(1))
        seconds = float(match.group(2))
        lines.append(LyricLine(time=minutes * 60 + seconds, text=text))
    return lines


def format_timestamp(seconds: float) -> str:
    """Format seconds as an LRC tag body, mm:ss.xx (centiseconds)."""
    if seconds < 0:
        seconds = 0.0
    centis = int(round(seconds * 100))
    minutes, centis = divmod(centis, 6000)
    return f"{minutes:02d}:{centis // 100:02d}.{centis % 100:02d}"


def format_synced_lyrics(lines: list[LyricLine]) -> str:
    """Render lines back to LRC text, one [mm:ss.xx]text line each."""
    return "\n".join(f"[{format_timestamp(line.time)}]{line.text}" for line in lines)
