import pytest

from chordsheet.models import Chunk, TextLine
from chordsheet.tokenizer import EM_SPACE, NBSP, format_line, tokenize_line

# ---------------------------------------------------------------------------
# tokenize_line
# ---------------------------------------------------------------------------


def test_special_space_constants():
    assert EM_SPACE == "\u2003"
    assert NBSP == "\u00a0"


def test_no_chords_single_chunk():
    assert tokenize_line("Just some lyrics").chunks == [Chunk(text="Just some lyrics")]


def test_chords_split_text():
    assert tokenize_line("[C]Hello [G]world").chunks == [
        Chunk(chord="C", text="Hello "),
        Chunk(chord="G", text="world"),
    ]


def test_leading_text_before_first_chord():
    assert tokenize_line("I [D]pulled").chunks == [
        Chunk(text="I "),
        Chunk(chord="D", text="pulled"),
    ]


def test_chord_at_end_of_line_gets_placeholder():
    assert tokenize_line("End[D]").chunks == [
        Chunk(text="End"),
        Chunk(chord="D", text="\u00a0"),
    ]


def test_adjacent_chords_get_placeholder():
    assert tokenize_line("[D][G]la").chunks == [
        Chunk(chord="D", text="\u00a0"),
        Chunk(chord="G", text="la"),
    ]


def test_underscores_become_em_spaces():
    assert tokenize_line("Hold__on").chunks == [Chunk(text="Hold\u2003\u2003on")]


def test_underscores_in_chunks_after_chords():
    assert tokenize_line("a_[C]b_c").chunks == [
        Chunk(text="a\u2003"),
        Chunk(chord="C", text="b\u2003c"),
    ]


def test_underscore_inside_chord_untouched():
    # Only text spans are cleaned; the chord string is kept as written.
    assert tokenize_line("[C_x]la").chunks == [Chunk(chord="C_x", text="la")]


def test_unterminated_bracket_is_text():
    assert tokenize_line("oops [C la").chunks == [Chunk(text="oops [C la")]


def test_unterminated_bracket_after_chord():
    assert tokenize_line("[G]go [").chunks == [Chunk(chord="G", text="go [")]


def test_nested_bracket_not_a_chord():
    line = tokenize_line("[[C]]x")
    assert line.chunks == [
        Chunk(text="["),
        Chunk(chord="C", text="]x"),
    ]


def test_empty_brackets_not_a_chord():
    assert tokenize_line("a[]b").chunks == [Chunk(text="a[]b")]


def test_leading_whitespace_kept():
    assert tokenize_line("  [C]x").chunks[0] == Chunk(text="  ")


def test_empty_line():
    assert tokenize_line("").chunks == [Chunk(text="")]


# ---------------------------------------------------------------------------
# format_line
# ---------------------------------------------------------------------------


def test_format_line_restores_brackets_and_spacers():
    line = TextLine(chunks=[Chunk(text="a\u2003"), Chunk(chord="C", text="b")])
    assert format_line(line) == "a_[C]b"


def test_format_line_drops_placeholder():
    line = TextLine(chunks=[Chunk(text="End"), Chunk(chord="D", text="\u00a0")])
    assert format_line(line) == "End[D]"


def test_format_line_custom_spacer():
    line = TextLine(chunks=[Chunk(text="Hold\u2003on")])
    assert format_line(line, spacer=" ") == "Hold on"


@pytest.mark.parametrize(
    "raw",
    [
        "[C]Hello [G]world",
        "I [D]pulled into Nazareth, was [G]feelin'",
        "End[D]",
        "[D][G][A]",
        "Hold__on [Am7/G]_",
        "no chords at all",
        "  indented [F#m]line  ",
        "",
    ],
)
def test_round_trip_reconstruction(raw):
    assert format_line(tokenize_line(raw)) == raw
