"""Note arithmetic and chord-string decomposition.

All output is spelled in the canonical sharp chromatic scale::

    C  C#  D  D#  E  F  F#  G  G#  A  A#  B

Input may use sharps, flats, or German notation (``H`` = B, ``H#`` = C,
``Hb`` = A#).  Transposing re-spells every recognised root, even by zero
semitones: ``Db`` comes back as ``C#`` and ``H`` as ``B``.

A chord string has the shape ``<Root><Modifier>[/<Bass>]``:

    Am7/G  ->  root "A", modifier "m7", bass "G"
    F#sus4 ->  root "F#", modifier "sus4"

The modifier is never inspected; it is carried over verbatim.
"""

import logging
import re
from typing import NamedTuple

logger = logging.getLogger(__name__)

CHROMATIC_SCALE = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Every accepted spelling → its canonical sharp spelling.
NOTE_MAP = {
    "C": "C",
    "C#": "C#",
    "Db": "C#",
    "D": "D",
    "D#": "D#",
    "Eb": "D#",
    "E": "E",
    "Fb": "E",
    "E#": "F",
    "F": "F",
    "F#": "F#",
    "Gb": "F#",
    "G": "G",
    "G#": "G#",
    "Ab": "G#",
    "A": "A",
    "A#": "A#",
    "Bb": "A#",
    "B": "B",
    "Cb": "B",
    "B#": "C",
    # German / Scandinavian
    "H": "B",
    "H#": "C",
    "Hb": "A#",
}

# Root letter (any case) with an optional accidental, then everything else.
CHORD_ROOT_RE = re.compile(r"^([A-Ha-h][#b]?)(.*)$", re.DOTALL)


class ParsedChord(NamedTuple):
    root: str  # letter upper-cased, e.g. "Bb"
    modifier: str  # e.g. "m7", may be ""
    bass: str | None  # raw text after "/", unparsed


def split_root(part: str) -> tuple[str, str] | None:
    """Return ``(root, rest)`` with the root letter upper-cased, or ``None``."""
    m = CHORD_ROOT_RE.match(part)
    if not m:
        return None
    root, rest = m.groups()
    return root[0].upper() + root[1:], rest


def parse_chord(chord: str) -> ParsedChord | None:
    """Split *chord* into root, modifier and raw bass part.

    Returns ``None`` when the part before the first ``/`` does not start with
    a note letter.
    """
    main, sep, bass = chord.partition("/")
    split = split_root(main)
    if split is None:
        return None
    root, modifier = split
    return ParsedChord(root, modifier, bass if sep else None)


def note_index(note: str) -> int | None:
    """Return the 0–11 chromatic index of *note*, or ``None`` if unknown."""
    canonical = NOTE_MAP.get(note)
    if canonical is None:
        return None
    return CHROMATIC_SCALE.index(canonical)


def transpose_note(note: str, semitones: int) -> str:
    """Shift *note* by *semitones*; unknown notes are returned unchanged."""
    index = note_index(note)
    if index is None:
        logger.debug("Unknown note %r; left unchanged", note)
        return note
    # Python's % is already non-negative for a positive modulus.
    return CHROMATIC_SCALE[(index + semitones) % 12]


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a chord string such as ``"Am7/G"`` by *semitones*.

    Empty and unparseable chords are returned unchanged.  A bass part that
    does not start with a note letter is kept verbatim while the root is
    still transposed; an empty one (``"C/"``) is dropped with its slash.
    """
    if not chord or not chord.strip():
        return chord

    parsed = parse_chord(chord)
    if parsed is None:
        logger.debug("Unparseable chord %r; left unchanged", chord)
        return chord

    result = transpose_note(parsed.root, semitones) + parsed.modifier

    if parsed.bass:
        bass_split = split_root(parsed.bass)
        if bass_split is None:
            logger.debug("Unparseable bass %r in chord %r; kept verbatim", parsed.bass, chord)
            result += "/" + parsed.bass
        else:
            bass_root, bass_modifier = bass_split
            result += "/" + transpose_note(bass_root, semitones) + bass_modifier

    return result
