import json
from dataclasses import dataclass, field
from enum import Enum


class SectionType(str, Enum):
    TITLE = "title"  # "# My Song"
    SECTION = "section"  # "## Verse", or the implicit unnamed section


@dataclass(frozen=True)
class Chunk:
    """An optional chord plus the text that follows it on the line.

    Example: the line "[C]Hello [G]world" yields
    ``Chunk(chord="C", text="Hello ")`` and ``Chunk(chord="G", text="world")``.
    """

    text: str
    chord: str | None = None

    def to_dict(self) -> dict:
        data = {"text": self.text}
        if self.chord is not None:
            data["chord"] = self.chord
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Chunk":
        return cls(text=data.get("text", ""), chord=data.get("chord"))


@dataclass
class TextLine:
    """One line of a section as an ordered list of chunks."""

    chunks: list[Chunk] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "TextLine":
        """A blank line: one chunk with no chord and no text."""
        return cls(chunks=[Chunk(text="")])

    def to_dict(self) -> dict:
        return {"chunks": [chunk.to_dict() for chunk in self.chunks]}

    @classmethod
    def from_dict(cls, data: dict) -> "TextLine":
        return cls(chunks=[Chunk.from_dict(c) for c in data.get("chunks", [])])


@dataclass
class Section:
    """A title or a named part of a song (verse, chorus, ...)."""

    type: SectionType
    name: str = ""  # empty for the implicit section opened by leading content
    lines: list[TextLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "name": self.name,
            "lines": [line.to_dict() for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Section":
        return cls(
            type=SectionType(data["type"]),
            name=data.get("name", ""),
            lines=[TextLine.from_dict(line) for line in data.get("lines", [])],
        )


@dataclass(frozen=True)
class SongMetadata:
    """Credits taken from the frontmatter block."""

    musik: str | None = None  # composer / music credit
    text: str | None = None  # lyricist credit
    copyright: str | None = None

    def is_empty(self) -> bool:
        return self.musik is None and self.text is None and self.copyright is None

    def to_dict(self) -> dict:
        return {
            key: value
            for key, value in (
                ("musik", self.musik),
                ("text", self.text),
                ("copyright", self.copyright),
            )
            if value is not None
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SongMetadata":
        return cls(
            musik=data.get("musik"),
            text=data.get("text"),
            copyright=data.get("copyright"),
        )


@dataclass
class ParsedSong:
    """Root of a parsed chord sheet."""

    sections: list[Section] = field(default_factory=list)
    metadata: SongMetadata | None = None

    def to_dict(self) -> dict:
        data: dict = {"sections": [section.to_dict() for section in self.sections]}
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ParsedSong":
        meta = data.get("metadata")
        metadata = SongMetadata.from_dict(meta) if meta else None
        if metadata is not None and metadata.is_empty():
            metadata = None
        return cls(
            sections=[Section.from_dict(s) for s in data.get("sections", [])],
            metadata=metadata,
        )

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "ParsedSong":
        """Load a song previously written by :meth:`to_json`.

        Raises ``ValueError`` for malformed JSON or an unknown section type and
        ``KeyError`` when a section has no ``type``.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object at the top level")
        return cls.from_dict(data)
