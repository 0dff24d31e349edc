"""Shared CLI utilities."""

from __future__ import annotations

from pathlib import Path

import typer

from lyricspot.utils.console import console


def expand_inputs(inputs: list[str]) -> list[str]:
    """Expand title list files into individual titles.

    An input naming an existing .txt file is read as one title per line;
    blank lines and lines starting with # are skipped. Anything else is
    taken as a literal title.
    """
    expanded = []
    for inp in inputs:
        path = Path(inp)

        # .txt file: read as title list (one per line)
        if path.suffix == ".txt" and path.is_file():
            for line in path.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if line and not line.startswith("#"):
                    expanded.append(line)
            continue

        if inp.strip():
            expanded.append(inp)

    return expanded


def check_duration(duration: float | None) -> float | None:
    """Reject negative durations; treat zero as unknown."""
    if duration is None:
        return None
    if duration < 0:
        console.print(f"[red]Duration must not be negative:[/red] {duration}")
        raise typer.Exit(1)
    return duration or None


def format_seconds(seconds: float) -> str:
    """Format seconds as m:ss."""
    total = int(max(seconds, 0))
    return f"{total // 60}:{total % 60:02d}"
