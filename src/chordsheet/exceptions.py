class ChordSheetError(Exception):
    """Base exception for chordsheet."""


class FetchError(ChordSheetError):
    """Raised when an HTTP request fails (status 0: no response at all)."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class SourceError(ChordSheetError):
    """Raised when a location was reached but yields no chord sheet text."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read song from {location}: {reason}")


class UnsupportedSourceError(ChordSheetError):
    """Raised when no source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source can load: {location}")
