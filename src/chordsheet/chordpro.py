"""ChordPro formatter.

Renders a :class:`~chordsheet.models.ParsedSong` to ChordPro (``.cho``) text.

Section → ChordPro directive mapping
------------------------------------

+--------------------------------------+------------------------------------+
| Section                              | Output                             |
+======================================+====================================+
| title section ``# My Song``          | ``{title: My Song}``               |
+--------------------------------------+------------------------------------+
| ``Verse``, ``Verse N``, ``Strophe``  | ``{start_of_verse: <name>}`` /     |
|                                      | ``{end_of_verse}``                 |
+--------------------------------------+------------------------------------+
| ``Chorus``, ``Refrain``              | ``{start_of_chorus}`` /            |
|                                      | ``{end_of_chorus}``                |
+--------------------------------------+------------------------------------+
| ``Bridge``                           | ``{start_of_bridge}`` /            |
|                                      | ``{end_of_bridge}``                |
+--------------------------------------+------------------------------------+
| any other name (``Intro``, ...)      | ``{comment: <name>}``              |
+--------------------------------------+------------------------------------+
| unnamed section                      | no wrapper directive               |
+--------------------------------------+------------------------------------+

Frontmatter credits become ``{composer: ...}``, ``{lyricist: ...}`` and
``{copyright: ...}``.

Usage::

    from chordsheet.chordpro import ChordProFormatter
    formatter = ChordProFormatter()
    text = formatter.render(song)
    Path("output.cho").write_text(text)
"""

from .models import ParsedSong, Section, SectionType, SongMetadata
from .tokenizer import format_line

# Section names whose directives ChordPro has standardised.
_STRUCTURED = {
    "verse": ("start_of_verse", "end_of_verse"),
    "strophe": ("start_of_verse", "end_of_verse"),
    "chorus": ("start_of_chorus", "end_of_chorus"),
    "refrain": ("start_of_chorus", "end_of_chorus"),
    "bridge": ("start_of_bridge", "end_of_bridge"),
}

_METADATA_DIRECTIVES = (("musik", "composer"), ("text", "lyricist"), ("copyright", "copyright"))


class ChordProFormatter:
    """Render a :class:`~chordsheet.models.ParsedSong` to ChordPro text."""

    def render(self, song: ParsedSong) -> str:
        """Return ChordPro text for *song*.

        The returned string ends with a single newline and uses Unix line
        endings (``\\n``) throughout.
        """
        parts: list[str] = []

        # --- Title and credits ---
        for section in song.sections:
            if section.type is SectionType.TITLE:
                parts.append(f"{{title: {section.name}}}")
        if song.metadata is not None:
            parts.extend(_render_metadata(song.metadata))

        # --- Section blocks ---
        for section in song.sections:
            lines = _render_section(section)
            if not lines:
                continue
            if parts:
                parts.append("")  # blank line before every section
            parts.extend(lines)

        return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _render_metadata(metadata: SongMetadata) -> list[str]:
    return [
        f"{{{directive}: {getattr(metadata, attr)}}}"
        for attr, directive in _METADATA_DIRECTIVES
        if getattr(metadata, attr) is not None
    ]


def _render_section(section: Section) -> list[str]:
    """Return a list of lines for one section (no trailing blank line)."""
    # Spacers have no meaning in ChordPro; a plain space keeps the words apart.
    lines = [format_line(line, spacer=" ") for line in section.lines]
    # Blank lines at the edges only pad the wrapper directives.
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)

    if section.type is SectionType.TITLE or not section.name.strip():
        # Title already emitted as {title: ...}; unnamed sections get no wrapper
        return lines

    name = section.name
    name_lower = name.lower().split()[0]  # first word, e.g. "verse" from "Verse 1"

    if name_lower in _STRUCTURED:
        start_dir, end_dir = _STRUCTURED[name_lower]
        # Include the full name for verses (e.g. "Verse 1"), bare directive otherwise
        if start_dir == "start_of_verse":
            start_line = f"{{{start_dir}: {name}}}"
        else:
            start_line = f"{{{start_dir}}}"
        return [start_line, *lines, f"{{{end_dir}}}"]

    return [f"{{comment: {name}}}", *lines]
