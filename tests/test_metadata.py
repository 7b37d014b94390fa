from chordsheet.metadata import extract_metadata
from chordsheet.models import SongMetadata


def test_no_frontmatter_returns_text_unchanged():
    text = "  # Song\n[C]la"
    assert extract_metadata(text) == (None, text)


def test_basic_frontmatter():
    metadata, rest = extract_metadata("---\nMusik: Max Mustermann\nText: Jane Doe\n---\n# Song")
    assert metadata == SongMetadata(musik="Max Mustermann", text="Jane Doe")
    assert rest == "# Song"


def test_keys_are_case_insensitive():
    metadata, _ = extract_metadata("---\nMUSIK: A\ncopyRight: (c) 2024\n---\n")
    assert metadata == SongMetadata(musik="A", copyright="(c) 2024")


def test_keys_and_values_trimmed():
    metadata, _ = extract_metadata("---\n   text   :   Jane   \n---")
    assert metadata == SongMetadata(text="Jane")


def test_value_may_contain_colons():
    metadata, _ = extract_metadata("---\nCopyright: see https://example.com\n---")
    assert metadata.copyright == "see https://example.com"


def test_leading_whitespace_before_opening_marker():
    metadata, rest = extract_metadata("\n\n  ---\nMusik: A\n---\n\n\n## Verse")
    assert metadata == SongMetadata(musik="A")
    assert rest == "## Verse"


def test_unclosed_frontmatter_treated_as_content():
    text = "\n---\nMusik: A\n# Song"
    assert extract_metadata(text) == (None, text)


def test_unknown_keys_ignored():
    metadata, _ = extract_metadata("---\nAlbum: Foo\nMusik: A\n---")
    assert metadata == SongMetadata(musik="A")


def test_lines_without_colon_ignored():
    metadata, _ = extract_metadata("---\njust words\nText: B\n---")
    assert metadata == SongMetadata(text="B")


def test_empty_value_ignored():
    metadata, _ = extract_metadata("---\nMusik:\nText:   \n---\n# Song")
    assert metadata is None


def test_block_without_known_fields_still_removed():
    metadata, rest = extract_metadata("---\nAlbum: Foo\n---\n# Song")
    assert metadata is None
    assert rest == "# Song"


def test_empty_block_removed():
    assert extract_metadata("------\n# Song") == (None, "# Song")


def test_marker_later_in_text_is_not_frontmatter():
    text = "# Song\n---\nMusik: A\n---"
    assert extract_metadata(text) == (None, text)
