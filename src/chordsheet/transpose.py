"""Transpose every chord of a parsed song.

The input song is never modified; a fresh tree is built with only the chord
fields changed.  Section names, line and chunk counts, chunk texts and the
metadata are carried over as they are.
"""

from .models import Chunk, ParsedSong, Section, TextLine
from .theory import split_root, transpose_chord, transpose_note


def _transpose_chunk(chunk: Chunk, semitones: int) -> Chunk:
    if chunk.chord is None:
        return Chunk(text=chunk.text)
    return Chunk(chord=transpose_chord(chunk.chord, semitones), text=chunk.text)


def _transpose_line(line: TextLine, semitones: int) -> TextLine:
    return TextLine(chunks=[_transpose_chunk(c, semitones) for c in line.chunks])


def _transpose_section(section: Section, semitones: int) -> Section:
    return Section(
        type=section.type,
        name=section.name,
        lines=[_transpose_line(line, semitones) for line in section.lines],
    )


def transpose_song(song: ParsedSong, semitones: int) -> ParsedSong:
    """Return a copy of *song* with every chord shifted by *semitones*.

    Any integer works; only its value modulo 12 matters.  Even a shift of 0
    re-spells chords in canonical sharps (``Bb`` → ``A#``).
    """
    return ParsedSong(
        sections=[_transpose_section(s, semitones) for s in song.sections],
        metadata=song.metadata,
    )


def key_from_offset(original_key: str, semitones: int) -> str:
    """Return the key name reached by shifting *original_key*.

    ``key_from_offset("C", 2)`` is ``"D"``, ``key_from_offset("Am", 3)`` is
    ``"Cm"``.  Labels that don't start with a note letter come back unchanged.
    """
    split = split_root(original_key)
    if split is None:
        return original_key
    root, modifier = split
    return transpose_note(root, semitones) + modifier
