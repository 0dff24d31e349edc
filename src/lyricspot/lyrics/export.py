"""Save resolved lyrics to disk.

Synced lyrics can be written as subtitles (SRT, VTT, ASS via pysubs2) or
re-emitted as LRC. Each subtitle event lasts as long as the line would stay
active during playback. TXT writes the plain lyrics.
"""

from __future__ import annotations

from pathlib import Path

import pysubs2

from lyricspot.core.config import TimelineConfig
from lyricspot.core.models import LyricsResult
from lyricspot.lyrics.lrc import format_synced_lyrics
from lyricspot.lyrics.timeline import line_duration

EXPORT_FORMATS = ("lrc", "srt", "vtt", "ass", "txt")


def save_lyrics(
    result: LyricsResult,
    path: Path,
    fmt: str = "lrc",
    timeline: TimelineConfig | None = None,
) -> Path:
    """Save resolved lyrics to a file.

    Args:
        result: Resolved lyrics.
        path: Output file path.
        fmt: Format — "lrc", "srt", "vtt", "ass", or "txt".
        timeline: Line duration settings for subtitle formats.

    Returns:
        The path the file was written to.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported format: {fmt} (choose from {', '.join(EXPORT_FORMATS)})")
    if fmt != "txt" and not result.synced:
        raise ValueError(f"No synced lyrics to save as {fmt}")

    timeline = timeline or TimelineConfig()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "txt":
        text = result.plain or "\n".join(line.text for line in result.synced)
        path.write_text(text, encoding="utf-8")
    elif fmt == "lrc":
        path.write_text(format_synced_lyrics(result.synced) + "\n", encoding="utf-8")
    else:
        subs = pysubs2.SSAFile()
        for i, line in enumerate(result.synced):
            duration = line_duration(
                result.synced, i, timeline.min_line_duration, timeline.tail_duration
            )
            subs.events.append(
                pysubs2.SSAEvent(
                    start=pysubs2.make_time(s=line.time),
                    end=pysubs2.make_time(s=line.time + duration),
                    text=line.text,
                )
            )
        subs.save(str(path), format_=fmt)

    return path
