"""Map a playback time to the active synced lyric line."""

from __future__ import annotations

from lyricspot.core.models import ActiveLineState, LyricLine

MIN_LINE_DURATION = 0.5
TAIL_DURATION = 4.0


def line_duration(
    track: list[LyricLine],
    index: int,
    min_duration: float = MIN_LINE_DURATION,
    tail_duration: float = TAIL_DURATION,
) -> float:
    """Display duration of track[index]: until the next line, floored at min_duration."""
    start = track[index].time
    if index + 1 < len(track):
        end = track[index + 1].time
    else:
        end = start + tail_duration
    return max(min_duration, end - start)


def active_line(
    track: list[LyricLine],
    current_time: float,
    min_duration: float = MIN_LINE_DURATION,
    tail_duration: float = TAIL_DURATION,
) -> ActiveLineState:
    """Return the active line index and its display duration.

    The active line is the last line whose time is <= current_time. Its
    duration runs until the next line starts (or tail_duration for the final
    line) and is never shorter than min_duration, so lines sharing a
    timestamp still get a visible window.

    Pure function of its arguments: safe to call on every clock tick.
    """
    for index in range(len(track) - 1, -1, -1):
        if track[index].time <= current_time:
            return ActiveLineState(
                index=index,
                duration=line_duration(track, index, min_duration, tail_duration),
            )
    return ActiveLineState()
