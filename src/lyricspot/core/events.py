"""Lyrics lifecycle events for streaming state to external consumers.

A resolution attempt reports ``loading`` followed by exactly one of
``success``, ``empty`` or ``error``. Playback ticks report ``tick`` whenever
the active line changes. Consumers (terminal follower, UI bindings) register
a callback to receive these without reaching into session state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

LOADING = "loading"
SUCCESS = "success"
EMPTY = "empty"
ERROR = "error"
TICK = "tick"


@dataclass
class LyricsEvent:
    """A lifecycle event emitted by a lyrics session.

    Attributes:
        status: One of loading, success, empty, error, tick.
        message: Human-readable status message.
        data: Optional payload (resolved lyrics, active line state).
    """

    status: str
    message: str
    data: dict | None = field(default=None)


EventCallback = Callable[[LyricsEvent], None]
