"""lyricspot search command — list ranked lyrics candidates for a title."""

from __future__ import annotations

import asyncio
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from lyricspot.cli.utils import check_duration, format_seconds
from lyricspot.core.config import load_config
from lyricspot.utils.console import console


def search(
    video_title: Annotated[str, typer.Argument(help="Raw video title.")],
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", "-d", help="Video duration in seconds (soft tiebreaker)."),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Maximum number of candidates to show."),
    ] = 10,
    sequential: Annotated[
        bool,
        typer.Option("--sequential", help="Send strategy queries one after another."),
    ] = False,
) -> None:
    """Run every search strategy and show the ranked candidates."""
    from lyricspot.lyrics.resolver import search_candidates

    duration = check_duration(duration)
    config = load_config(**({"lrclib.concurrent": False} if sequential else {}))

    console.print(f"[bold]Searching:[/bold] {escape(video_title)}")
    ranked = asyncio.run(
        search_candidates(video_title, duration, config=config.lrclib, scoring=config.scoring)
    )
    if not ranked:
        console.print("[yellow]No lyrics found for this track.[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"Candidates ({len(ranked)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("ID", justify="right")
    table.add_column("Artist", max_width=30, no_wrap=True)
    table.add_column("Track", max_width=40, no_wrap=True)
    table.add_column("Length", justify="right")
    table.add_column("Synced")
    table.add_column("Plain")

    for i, scored in enumerate(ranked[:limit], 1):
        c = scored.candidate
        table.add_row(
            str(i),
            str(scored.score),
            str(c.id),
            escape(c.artist_name),
            escape(c.track_name),
            format_seconds(c.duration),
            "[green]yes[/green]" if c.synced_lyrics else "-",
            "[green]yes[/green]" if c.plain_lyrics else "-",
        )
    console.print(table)
