"""Render a :class:`~chordsheet.models.ParsedSong` back to chord-sheet text.

This is the inverse of :func:`chordsheet.parser.parse_song`; it is what the
``transpose`` command writes by default.

Usage::

    from chordsheet.sheet import SheetFormatter
    text = SheetFormatter().render(transpose_song(song, 2))
"""

from .models import ParsedSong, Section, SectionType, SongMetadata
from .parser import SECTION_PREFIX, TITLE_PREFIX
from .tokenizer import format_line

# Frontmatter labels, written capitalised as people type them.
_METADATA_LABELS = (("musik", "Musik"), ("text", "Text"), ("copyright", "Copyright"))


class SheetFormatter:
    """Render a :class:`~chordsheet.models.ParsedSong` to chord-sheet text."""

    def render(self, song: ParsedSong) -> str:
        """Return chord-sheet text for *song*.

        Lines are joined with ``\\n`` and no trailing newline is added, so
        ``parse_song(render(song))`` gives back an equal song.
        """
        parts: list[str] = []

        if song.metadata is not None and not song.metadata.is_empty():
            parts.extend(_render_frontmatter(song.metadata))

        for section in song.sections:
            parts.extend(_render_section(section))

        return "\n".join(parts)


def _render_frontmatter(metadata: SongMetadata) -> list[str]:
    lines = ["---"]
    for attr, label in _METADATA_LABELS:
        value = getattr(metadata, attr)
        if value is not None:
            lines.append(f"{label}: {value}")
    lines.append("---")
    return lines


def _render_section(section: Section) -> list[str]:
    lines = [format_line(line) for line in section.lines]
    if section.type is SectionType.TITLE:
        return [f"{TITLE_PREFIX}{section.name}", *lines]
    if section.name:
        return [f"{SECTION_PREFIX}{section.name}", *lines]
    # The unnamed section only exists because content came before any header.
    return lines
