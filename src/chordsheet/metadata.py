"""Frontmatter extraction.

A sheet may start with a block of credits::

    ---
    Musik: Max Mustermann
    Text: Jane Doe
    ---
    # Song

Only ``musik``, ``text`` and ``copyright`` are recognised (case-insensitive);
everything else in the block is dropped.
"""

import logging

from .models import SongMetadata

logger = logging.getLogger(__name__)

DELIMITER = "---"
RECOGNIZED_KEYS = ("musik", "text", "copyright")


def extract_metadata(text: str) -> tuple[SongMetadata | None, str]:
    """Split *text* into its frontmatter credits and the rest of the sheet.

    Returns ``(None, text)`` unchanged when there is no opening ``---`` at the
    start or no closing ``---`` after it.  When a block is found it is always
    removed, even if none of its lines are recognised, and the remaining text
    has its leading whitespace trimmed.
    """
    stripped = text.lstrip()
    if not stripped.startswith(DELIMITER):
        return None, text

    body_start = len(DELIMITER)
    body_end = stripped.find(DELIMITER, body_start)
    if body_end == -1:
        logger.debug("Frontmatter opened but never closed; treating as content")
        return None, text

    fields: dict[str, str] = {}
    for raw in stripped[body_start:body_end].splitlines():
        key, sep, value = raw.partition(":")
        if not sep:
            if raw.strip():
                logger.debug("Ignoring frontmatter line without a colon: %r", raw)
            continue
        key = key.strip().lower()
        value = value.strip()
        if key not in RECOGNIZED_KEYS:
            logger.debug("Ignoring unknown frontmatter key %r", key)
            continue
        if value:
            fields[key] = value

    remaining = stripped[body_end + len(DELIMITER) :].lstrip()
    metadata = SongMetadata(**fields) if fields else None
    return metadata, remaining
