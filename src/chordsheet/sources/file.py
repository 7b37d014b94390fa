"""Local files, or stdin when the location is ``-``."""

import re
import sys
from pathlib import Path

from ..exceptions import SourceError
from .base import SongSource

# "http://", "ftp://", ... but not a Windows drive letter such as "C:\"
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+://")

STDIN = "-"


class FileSource(SongSource):
    """Read a chord sheet from a UTF-8 text file."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return not _SCHEME_RE.match(location)

    def load(self, location: str) -> str:
        if location == STDIN:
            return sys.stdin.read()
        try:
            return Path(location).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SourceError(location, "file not found") from exc
        except UnicodeDecodeError as exc:
            raise SourceError(location, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise SourceError(location, exc.strerror or str(exc)) from exc
