"""Chord sheets published on the web.

Plain-text responses are used as they are.  For HTML pages the sheet is taken
from the first ``<pre>`` block, which is how song-book sites usually publish
raw chord sheets::

    <h1>My Song</h1>
    <pre>
    ## Verse
    [C]Hello [G]world
    </pre>
"""

import logging

import httpx
from bs4 import BeautifulSoup

from ..exceptions import FetchError, SourceError
from .base import SongSource

logger = logging.getLogger(__name__)

TIMEOUT = 15

_FETCH_HEADERS = {
    "User-Agent": "chordsheet",
    "Accept": "text/plain,text/markdown,text/html;q=0.9,*/*;q=0.5",
}


class HttpSource(SongSource):
    """Fetch a chord sheet over HTTP(S)."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def fetch(self, url: str) -> httpx.Response:
        try:
            resp = httpx.get(
                url,
                headers=_FETCH_HEADERS,
                follow_redirects=True,
                timeout=TIMEOUT,
            )
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp

    def load(self, location: str) -> str:
        resp = self.fetch(location)
        content_type = resp.headers.get("content-type", "")
        if "html" not in content_type:
            return resp.text
        logger.debug("HTML response from %s; looking for a <pre> block", location)
        return extract_pre_text(resp.text, location)


def extract_pre_text(html: str, url: str) -> str:
    """Return the text of the first ``<pre>`` element in *html*.

    Raises :class:`~chordsheet.exceptions.SourceError` if the page has none.
    """
    soup = BeautifulSoup(html, "html.parser")
    pre = soup.find("pre")
    if pre is None:
        raise SourceError(url, "HTML page has no <pre> block")
    # <pre> content usually opens with a newline right after the tag
    return pre.get_text().lstrip("\n")
