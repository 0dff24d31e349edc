"""lyricspot lrc command — inspect a local LRC file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from lyricspot.core.config import load_config
from lyricspot.lyrics.lrc import parse_synced_lyrics
from lyricspot.lyrics.timeline import active_line
from lyricspot.utils.console import console


def lrc(
    lrc_file: Annotated[Path, typer.Argument(help="Path to an .lrc file.")],
    at: Annotated[
        Optional[float],
        typer.Option("--at", help="Highlight the line active at this playback time (seconds)."),
    ] = None,
) -> None:
    """Parse an LRC file and list its timed lines."""
    if not lrc_file.is_file():
        console.print(f"[red]File not found:[/red] {lrc_file}")
        raise typer.Exit(1)

    lines = parse_synced_lyrics(lrc_file.read_text(encoding="utf-8-sig"))
    if not lines:
        console.print(f"[yellow]No timed lines in:[/yellow] {lrc_file}")
        raise typer.Exit(1)

    active_index = -1
    if at is not None:
        timeline = load_config().timeline
        state = active_line(lines, at, timeline.min_line_duration, timeline.tail_duration)
        active_index = state.index
        if state.is_active:
            console.print(
                f"[bold]Active at {at:.2f}s:[/bold] line {state.index + 1} "
                f"for {state.duration:.2f}s"
            )
        else:
            console.print(f"[dim]No line active yet at {at:.2f}s.[/dim]")

    table = Table(title=f"{lrc_file.name} ({len(lines)} lines)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Time", justify="right", style="cyan")
    table.add_column("Text")
    for i, line in enumerate(lines):
        style = "bold green" if i == active_index else None
        table.add_row(str(i + 1), f"{line.time:.2f}", escape(line.text), style=style)
    console.print(table)
