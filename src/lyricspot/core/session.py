"""Per-video lyrics session — resolve on title change, track on clock tick.

The player owns the video and the playback clock. It tells the session when
a new title is known and, every few hundred milliseconds, what time it is.
The session resolves lyrics for the title and answers with the active line.

Only the latest title may write state: each resolution attempt carries a
token, and a result whose token is no longer current is discarded.
"""

from __future__ import annotations

import asyncio
import itertools

from rich.markup import escape

from lyricspot.core.config import LyricspotConfig
from lyricspot.core.events import EMPTY, ERROR, LOADING, SUCCESS, TICK, EventCallback, LyricsEvent
from lyricspot.core.models import ActiveLineState, LyricLine, LyricsResult
from lyricspot.lyrics.client import LrclibClient
from lyricspot.lyrics.resolver import resolve
from lyricspot.lyrics.timeline import active_line
from lyricspot.utils.console import console

NO_LYRICS_MESSAGE = "No lyrics found for this track"
FETCH_FAILED_MESSAGE = "Failed to fetch lyrics"


class LyricsSession:
    """Lyrics state for whatever video is currently loaded."""

    def __init__(
        self,
        config: LyricspotConfig | None = None,
        client: LrclibClient | None = None,
        on_event: EventCallback | None = None,
    ) -> None:
        self.config = config or LyricspotConfig()
        self.client = client
        self.on_event = on_event

        self._tokens = itertools.count(1)
        self._current_token = 0
        self._task: asyncio.Task | None = None

        self.title: str | None = None
        self.status: str | None = None
        self.message = ""
        self.result = LyricsResult()
        self.active = ActiveLineState()

    @property
    def track(self) -> list[LyricLine]:
        return self.result.synced

    @property
    def loading(self) -> bool:
        return self.status == LOADING

    def _emit(self, status: str, message: str, data: dict | None = None) -> None:
        if self.on_event:
            self.on_event(LyricsEvent(status=status, message=message, data=data))

    def _is_current(self, token: int) -> bool:
        return token == self._current_token

    def reset(self) -> None:
        """Forget the current video. Any in-flight attempt becomes stale."""
        self._current_token = next(self._tokens)
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.title = None
        self.status = None
        self.message = ""
        self.result = LyricsResult()
        self.active = ActiveLineState()

    async def on_video_title_resolved(
        self, title: str, duration: float | None = None
    ) -> LyricsResult | None:
        """Resolve lyrics for a newly loaded video.

        Returns the committed result, or None if the title was blank or a newer
        title arrived while this one was resolving.
        """
        if not title or not title.strip():
            return None

        token = next(self._tokens)
        self._current_token = token
        self.title = title
        self.status = LOADING
        self.message = "Searching for lyrics..."
        self.result = LyricsResult()
        self.active = ActiveLineState()
        self._emit(LOADING, self.message, {"title": title})

        try:
            result = await resolve(
                title,
                duration,
                client=self.client,
                config=self.config.lrclib,
                scoring=self.config.scoring,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            if not self._is_current(token):
                return None
            console.print(f"[red]Lyrics lookup failed:[/red] {escape(str(e))}")
            self.status = ERROR
            self.message = FETCH_FAILED_MESSAGE
            self._emit(ERROR, self.message, {"title": title, "reason": str(e)})
            return None

        if not self._is_current(token):
            console.print(f"[dim]Discarding stale lyrics for:[/dim] {escape(title)}")
            return None

        self.result = result
        if result.found:
            self.status = SUCCESS
            self.message = ""
            self._emit(
                SUCCESS,
                f"Found {len(result.synced)} synced line(s)" if result.synced else "Found lyrics",
                {"plain": result.plain, "synced": result.synced},
            )
        else:
            self.status = EMPTY
            self.message = NO_LYRICS_MESSAGE
            self._emit(EMPTY, self.message, {"title": title})
        return result

    def submit(self, title: str, duration: float | None = None) -> asyncio.Task:
        """Schedule a resolution on the running loop, cancelling the previous one.

        A blank title leaves the in-flight attempt running; the returned task
        resolves to None.
        """
        loop = asyncio.get_running_loop()
        if not title or not title.strip():
            return loop.create_task(self.on_video_title_resolved(title, duration))

        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = loop.create_task(self.on_video_title_resolved(title, duration))
        return self._task

    def on_playback_time_tick(self, current_time: float) -> ActiveLineState:
        """Recompute the active line for the current playback time."""
        if not self.track:
            return self.active

        state = active_line(
            self.track,
            current_time,
            self.config.timeline.min_line_duration,
            self.config.timeline.tail_duration,
        )
        if state.index != self.active.index:
            self._emit(
                TICK,
                self.track[state.index].text if state.is_active else "",
                {"index": state.index, "duration": state.duration, "time": current_time},
            )
        self.active = state
        return state
