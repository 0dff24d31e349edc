"""lyricspot CLI entry point."""

from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from lyricspot import __version__
from lyricspot.cli.follow import follow
from lyricspot.cli.lrc import lrc
from lyricspot.cli.resolve import resolve
from lyricspot.cli.search import search
from lyricspot.cli.title import title

app = typer.Typer(
    name="lyricspot",
    help="lyricspot — Find and follow synced lyrics for music videos.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lyricspot {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """lyricspot — Find and follow synced lyrics for music videos."""
    # Load .env (LYRICSPOT_* settings) without overriding shell exports
    load_dotenv(override=False)


app.command("title")(title)
app.command("search")(search)
app.command("resolve")(resolve)
app.command("follow")(follow)
app.command("lrc")(lrc)
