from abc import ABC, abstractmethod


class SongSource(ABC):
    """Abstract base class for everything that can load raw chord-sheet text."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can load the given location."""

    @abstractmethod
    def load(self, location: str) -> str:
        """Return the raw chord-sheet text found at *location*.

        Raises FetchError or SourceError when nothing usable can be read.
        """
