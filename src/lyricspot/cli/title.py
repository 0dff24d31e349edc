"""lyricspot title command — show how a video title is parsed."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from lyricspot.lyrics.title import build_queries, heavy_clean, light_clean, parse_video_title
from lyricspot.utils.console import console


def title(
    video_title: Annotated[str, typer.Argument(help="Raw video title.")],
) -> None:
    """Show the artist/track guess and the search queries for a title."""
    guess = parse_video_title(video_title)

    console.print(f"[bold]Artist:[/bold] {escape(guess.artist or '-')}")
    console.print(f"[bold]Track:[/bold] {escape(guess.track or '-')}")
    console.print(f"[bold]Light clean:[/bold] {escape(light_clean(video_title) or '-')}")
    console.print(f"[bold]Heavy clean:[/bold] {escape(heavy_clean(video_title) or '-')}")

    queries = build_queries(video_title)
    if not queries:
        console.print("[yellow]No searchable query in this title.[/yellow]")
        return

    table = Table(title=f"Search Queries ({len(queries)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Strategy", style="bold cyan")
    table.add_column("Parameters")
    for i, query in enumerate(queries, 1):
        table.add_row(str(i), query.strategy, escape(query.describe()))
    console.print(table)
