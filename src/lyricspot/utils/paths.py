"""Output file naming for exported lyrics."""

from __future__ import annotations

import re
from pathlib import Path


def slugify(text: str) -> str:
    """Convert text to a filesystem-safe slug."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-+", "-", text)
    return text[:80].strip("-")


def lyrics_output_path(
    title: str, output_dir: Path, fmt: str, taken: set[Path] | None = None
) -> Path:
    """Path for a title's exported lyrics: <output_dir>/<slug>.<fmt>.

    Paths already in ``taken`` get a numeric suffix (<slug>-2.<fmt>, ...).
    """
    slug = slugify(title) or "untitled"
    path = Path(output_dir) / f"{slug}.{fmt}"
    n = 2
    while taken is not None and path in taken:
        path = Path(output_dir) / f"{slug}-{n}.{fmt}"
        n += 1
    return path
