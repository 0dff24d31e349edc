"""lyricspot resolve command — find lyrics for one or more video titles."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from lyricspot.cli.utils import check_duration, expand_inputs
from lyricspot.core.config import load_config
from lyricspot.core.models import LyricsResult
from lyricspot.utils.console import console


def _print_result(result: LyricsResult, max_lines: int) -> None:
    c = result.candidate
    console.print(
        f"[green]Match:[/green] {escape(c.artist_name)} — {escape(c.track_name)} (id {c.id})"
    )
    if result.synced:
        console.print(f"[bold]Synced lines:[/bold] {len(result.synced)}")
        for line in result.synced[:max_lines]:
            console.print(f"[dim]{line.time:7.2f}[/dim]  {escape(line.text)}")
    elif result.plain:
        console.print("[dim]No synced lyrics, showing plain lyrics.[/dim]")
        for text in result.plain.splitlines()[:max_lines]:
            console.print(escape(text))


def resolve(
    inputs: Annotated[
        list[str],
        typer.Argument(help="Video titles, or .txt files with one title per line."),
    ],
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", "-d", help="Video duration in seconds (single title only)."),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-o", help="Output file (single title) or directory (several titles)."
        ),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: lrc, srt, vtt, ass, txt."),
    ] = "lrc",
    max_lines: Annotated[
        int,
        typer.Option("--lines", help="Number of lyric lines to preview."),
    ] = 8,
) -> None:
    """Resolve lyrics for video titles and optionally save them.

    Accepts several titles at once, or .txt files listing one title per line.
    """
    from lyricspot.lyrics.export import EXPORT_FORMATS, save_lyrics
    from lyricspot.lyrics.resolver import resolve as resolve_lyrics
    from lyricspot.utils.paths import lyrics_output_path

    if fmt not in EXPORT_FORMATS:
        console.print(f"[red]Unsupported format:[/red] {fmt} ({', '.join(EXPORT_FORMATS)})")
        raise typer.Exit(1)

    duration = check_duration(duration)
    config = load_config()

    expanded = expand_inputs(inputs)
    if not expanded:
        console.print("[red]No titles given. Check your inputs.[/red]")
        raise typer.Exit(1)

    # Single title: preview and optional save
    if len(expanded) == 1:
        video_title = expanded[0]
        console.print(f"[bold]Resolving:[/bold] {escape(video_title)}")
        result = asyncio.run(
            resolve_lyrics(video_title, duration, config=config.lrclib, scoring=config.scoring)
        )
        if not result.found:
            console.print("[yellow]No lyrics found for this track.[/yellow]")
            raise typer.Exit(1)

        _print_result(result, max_lines)
        if output is not None:
            try:
                path = save_lyrics(result, output, fmt=fmt, timeline=config.timeline)
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                raise typer.Exit(1)
            console.print(f"[green]Saved:[/green] {path}")
        return

    # Batch mode: resolve each, collect results
    results: list[tuple[str, str, str]] = []  # (title, status, detail)
    written: set[Path] = set()
    console.print(f"[bold]Resolving {len(expanded)} titles...[/bold]\n")

    for i, video_title in enumerate(expanded, 1):
        console.rule(f"[bold][{i}/{len(expanded)}] {escape(video_title)}[/bold]")
        result = asyncio.run(
            resolve_lyrics(video_title, config=config.lrclib, scoring=config.scoring)
        )
        if not result.found:
            results.append((video_title, "empty", "-"))
            continue

        kind = "synced" if result.has_synced else "plain"
        detail = f"{result.candidate.artist_name} — {result.candidate.track_name}"
        if output is not None:
            target = lyrics_output_path(video_title, output, fmt, taken=written)
            if target != lyrics_output_path(video_title, output, fmt):
                console.print(f"[yellow]Name already used, saving as:[/yellow] {target.name}")
            try:
                path = save_lyrics(result, target, fmt=fmt, timeline=config.timeline)
                written.add(path)
                detail = str(path)
            except ValueError as e:
                console.print(f"[yellow]Not saved:[/yellow] {e}")
        results.append((video_title, kind, detail))

    # Summary table
    console.print()
    table = Table(title=f"Lyrics Results ({len(expanded)} titles)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", max_width=50, no_wrap=True)
    table.add_column("Lyrics")
    table.add_column("Match / Output", max_width=50, no_wrap=True)

    found = 0
    for i, (video_title, status, detail) in enumerate(results, 1):
        style = "red" if status == "empty" else "green"
        table.add_row(
            str(i), escape(video_title), f"[{style}]{status}[/{style}]", escape(detail)
        )
        if status != "empty":
            found += 1

    console.print(table)
    console.print(f"\n[bold]{found}/{len(expanded)} found[/bold]")
