import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from .chordpro import ChordProFormatter
from .exceptions import FetchError, SourceError, UnsupportedSourceError
from .models import ParsedSong
from .parser import parse_song
from .registry import get_source
from .sheet import SheetFormatter
from .transpose import key_from_offset, transpose_song

logger = logging.getLogger(__name__)

FORMATS = ("json", "sheet", "chordpro")


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_song(location: str, from_json: bool = False) -> ParsedSong:
    """Load *location* and parse it, exiting with status 1 on any failure."""
    # --- Resolve source ---
    try:
        source = get_source(location)
    except UnsupportedSourceError as exc:
        _fail(str(exc))

    # --- Fetch ---
    try:
        text = source.load(location)
    except FetchError as exc:
        msg = f"Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        _fail(msg)
    except SourceError as exc:
        _fail(str(exc))
    logger.info("Loaded %d characters from %s", len(text), location)

    # --- Parse ---
    if not from_json:
        return parse_song(text)
    try:
        return ParsedSong.from_json(text)
    except (ValueError, KeyError) as exc:
        _fail(f"{location} is not a serialized song: {exc}")


def _render(song: ParsedSong, fmt: str) -> str:
    if fmt == "chordpro":
        return ChordProFormatter().render(song)
    if fmt == "sheet":
        return SheetFormatter().render(song)
    return song.to_json() + "\n"


def _emit(text: str, output_path: str | None) -> None:
    # Sheet text is written as rendered; a trailing newline would add a blank line.
    if output_path is None:
        click.echo(text, nl=False)
        return
    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    logger.info("Wrote %d characters to %s", len(text), dest)
    click.echo(f"Written to {dest}")


_format_option = click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    help="Output format.",
)
_output_option = click.option(
    "-o",
    "--output",
    "output_path",
    default=None,
    metavar="PATH",
    help="Write to PATH instead of stdout.",
)


@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "auto_envvar_prefix": "CHORDSHEET",
    }
)
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output).")
def main(verbose: int) -> None:
    """Parse and transpose chord sheets.

    \b
    Sheet format:
      # Title
      ## Verse 1
      [C]Hello [G]world

    LOCATION is a file path, "-" for stdin, or an http(s) URL.
    """
    _configure_logging(verbose)


@main.command()
@click.argument("location")
@click.option("-s", "--semitones", type=int, default=0, show_default=True,
              help="Transpose by this many semitones before output.")
@_format_option
@_output_option
def parse(location: str, semitones: int, fmt: str | None, output_path: str | None) -> None:
    """Parse a chord sheet and print it as JSON (or another format)."""
    song = _load_song(location)
    if semitones:
        song = transpose_song(song, semitones)
    _emit(_render(song, fmt or "json"), output_path)


@main.command()
@click.argument("location")
@click.option("-s", "--semitones", type=int, required=True,
              help="Semitones to shift every chord by (negative = down).")
@click.option("--from-json", is_flag=True, default=False,
              help="LOCATION holds a song serialized by 'parse', not sheet text.")
@_format_option
@_output_option
def transpose(
    location: str,
    semitones: int,
    from_json: bool,
    fmt: str | None,
    output_path: str | None,
) -> None:
    """Transpose every chord of a song.

    Chords come out in sharp spelling: Bb becomes A#, H becomes B.
    """
    song = transpose_song(_load_song(location, from_json=from_json), semitones)
    _emit(_render(song, fmt or "sheet"), output_path)


@main.command()
@click.argument("original_key", metavar="KEY")
@click.option("-s", "--semitones", type=int, required=True,
              help="Semitones to shift the key by (negative = down).")
def key(original_key: str, semitones: int) -> None:
    """Print the key reached by shifting KEY, e.g. 'Am' by 3 gives 'Cm'."""
    click.echo(key_from_offset(original_key, semitones))
