"""lyricspot follow command — play lyrics along a simulated playback clock."""

from __future__ import annotations

import asyncio
import time
from typing import Annotated, Optional

import typer
from rich.markup import escape

from lyricspot.cli.utils import check_duration, format_seconds
from lyricspot.core.config import LyricspotConfig, load_config
from lyricspot.core.events import EMPTY, ERROR, LOADING, TICK, LyricsEvent
from lyricspot.core.session import LyricsSession
from lyricspot.utils.console import console


def _print_event(event: LyricsEvent) -> None:
    if event.status == LOADING:
        console.print(f"[dim]{escape(event.message)}[/dim]")
    elif event.status in (EMPTY, ERROR):
        console.print(f"[yellow]{escape(event.message)}[/yellow]")
    elif event.status == TICK and event.data["index"] >= 0:
        clock = format_seconds(event.data["time"])
        console.print(
            f"[dim]{clock}[/dim]  [bold]{escape(event.message)}[/bold] "
            f"[dim]({event.data['duration']:.1f}s)[/dim]"
        )


async def _follow(
    video_title: str,
    duration: float | None,
    start: float,
    speed: float,
    config: LyricspotConfig,
) -> bool:
    session = LyricsSession(config=config, on_event=_print_event)
    result = await session.on_video_title_resolved(video_title, duration)
    if result is None or not result.found:
        return False
    if not result.synced:
        console.print("[dim]No synced lyrics, showing plain lyrics.[/dim]")
        console.print(escape(result.plain))
        return True

    c = result.candidate
    console.print(
        f"[green]Playing:[/green] {escape(c.artist_name)} — {escape(c.track_name)}\n"
    )
    end = result.synced[-1].time + config.timeline.tail_duration
    interval = config.timeline.tick_interval
    origin = time.monotonic()
    current = start
    while current <= end:
        session.on_playback_time_tick(current)
        await asyncio.sleep(interval / speed)
        current = start + (time.monotonic() - origin) * speed
    return True


def follow(
    video_title: Annotated[str, typer.Argument(help="Raw video title.")],
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", "-d", help="Video duration in seconds (soft tiebreaker)."),
    ] = None,
    start: Annotated[
        float,
        typer.Option("--start", "-s", help="Playback position to start from, in seconds."),
    ] = 0.0,
    speed: Annotated[
        float,
        typer.Option("--speed", help="Playback speed multiplier."),
    ] = 1.0,
) -> None:
    """Resolve lyrics and print each line as a simulated playback reaches it."""
    duration = check_duration(duration)
    if speed <= 0:
        console.print(f"[red]Speed must be positive:[/red] {speed}")
        raise typer.Exit(1)

    config = load_config()
    try:
        ok = asyncio.run(_follow(video_title, duration, max(start, 0.0), speed, config))
    except KeyboardInterrupt:
        console.print("\n[dim]Stopped.[/dim]")
        return
    if not ok:
        raise typer.Exit(1)
