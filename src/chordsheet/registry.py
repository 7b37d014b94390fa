from .exceptions import UnsupportedSourceError
from .sources.base import SongSource
from .sources.file import FileSource
from .sources.http import HttpSource

_SOURCES: list[type[SongSource]] = [
    HttpSource,
    FileSource,
]


def get_source(location: str) -> SongSource:
    """Return an instantiated source for the given location.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)
