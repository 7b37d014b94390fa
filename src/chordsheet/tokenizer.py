"""Split one chord-sheet line into chord/text chunks, and join them back.

Example::

    "Hello [G]wor_ld[D]"
    -> [Chunk(text="Hello "), Chunk(chord="G", text="wor\u2003ld"), Chunk(chord="D", text="\u00a0")]

Underscores are spacers and come out as EM SPACE.  A chord with no text after
it (followed by another chord or the end of the line) gets a NO-BREAK SPACE so
renderers still have something to anchor the chord to.
"""

import re

from .models import Chunk, TextLine

EM_SPACE = "\u2003"
NBSP = "\u00a0"
SPACER = "_"

# [C], [Am7/G], [F#sus4]; no nested brackets
CHORD_MARKER_RE = re.compile(r"\[([^\[\]]+)\]")


def _clean(text: str) -> str:
    return text.replace(SPACER, EM_SPACE)


def tokenize_line(line: str) -> TextLine:
    """Return the chunks of *line*.

    The caller decides about trimming; *line* is scanned exactly as given.
    An unterminated ``[`` is ordinary text.
    """
    matches = list(CHORD_MARKER_RE.finditer(line))
    if not matches:
        return TextLine(chunks=[Chunk(text=_clean(line))])

    chunks: list[Chunk] = []
    if matches[0].start() > 0:
        chunks.append(Chunk(text=_clean(line[: matches[0].start()])))

    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(line)
        text = line[m.end() : end]
        chunks.append(Chunk(chord=m.group(1), text=_clean(text) if text else NBSP))

    return TextLine(chunks=chunks)


def format_line(line: TextLine, spacer: str = SPACER) -> str:
    """Rebuild bracket notation from *line*.

    Reverses :func:`tokenize_line`: the NBSP placeholder under a bare chord is
    dropped and every EM SPACE becomes *spacer*.
    """
    parts: list[str] = []
    for chunk in line.chunks:
        text = chunk.text
        if chunk.chord is not None:
            parts.append(f"[{chunk.chord}]")
            if text == NBSP:
                text = ""
        parts.append(text.replace(EM_SPACE, spacer))
    return "".join(parts)
