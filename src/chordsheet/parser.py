"""Chord-sheet parser: raw text → :class:`~chordsheet.models.ParsedSong`.

Format
------

    ---                      optional frontmatter, see chordsheet.metadata
    Musik: Max Mustermann
    ---
    # My Song                title section
    ## Verse 1               named section
    [C]Hello [G]world        content line with inline chords
                             blank lines are kept inside a section
    ## Chorus
    ...

Content that appears before any header opens an unnamed section.

Chord markers on a ``# `` title line are not tokenized; they stay in the
title name as literal text.
"""

from enum import Enum, auto

from .metadata import extract_metadata
from .models import ParsedSong, Section, SectionType, TextLine
from .tokenizer import tokenize_line

TITLE_PREFIX = "# "
SECTION_PREFIX = "## "


class LineKind(Enum):
    TITLE = auto()  # "# My Song"
    SECTION = auto()  # "## Verse"
    BLANK = auto()  # empty or whitespace only
    CONTENT = auto()  # everything else


def classify_line(line: str) -> tuple[LineKind, str]:
    """Classify one raw line.

    Returns the :class:`LineKind` and, for headers, the trimmed header name
    (an empty string otherwise).
    """
    stripped = line.strip()
    if stripped.startswith(SECTION_PREFIX):
        return LineKind.SECTION, stripped[len(SECTION_PREFIX) :].strip()
    if stripped.startswith(TITLE_PREFIX):
        return LineKind.TITLE, stripped[len(TITLE_PREFIX) :].strip()
    if not stripped:
        return LineKind.BLANK, ""
    return LineKind.CONTENT, ""


def parse_song(text: str) -> ParsedSong:
    """Parse a chord sheet into sections, lines and chunks.

    Algorithm
    ---------
    1. Strip the frontmatter block, if any (:func:`extract_metadata`).
    2. Walk the remaining lines keeping one *current* section:

       * a header line opens a new section (title or plain) and becomes
         current; it contributes no content line;
       * with a current section, a blank line appends an empty line and any
         other line is tokenized and appended;
       * without one, the first non-blank line opens an unnamed section;
         blank lines before it are dropped.

    Never raises; any text yields a song.
    """
    metadata, body = extract_metadata(text)

    sections: list[Section] = []
    current: Section | None = None

    for raw in body.split("\n"):
        kind, name = classify_line(raw)

        if kind is LineKind.TITLE or kind is LineKind.SECTION:
            section_type = SectionType.TITLE if kind is LineKind.TITLE else SectionType.SECTION
            current = Section(type=section_type, name=name)
            sections.append(current)
            continue

        if kind is LineKind.BLANK:
            if current is not None:
                current.lines.append(TextLine.empty())
            continue

        # LineKind.CONTENT
        line = tokenize_line(raw.rstrip("\r"))
        if current is None:
            current = Section(type=SectionType.SECTION, name="")
            sections.append(current)
        current.lines.append(line)

    return ParsedSong(sections=sections, metadata=metadata)
