# ABOUTME: J-WID (JASRAC work database) source adapter.
# ABOUTME: Builds the search request, fetches through the J-WID scheduler, and parses result rows.

import logging

from musicdb.lookup.candidate import RawCandidate
from musicdb.lookup.http import HtmlFetcher, SourceUnavailable
from musicdb.lookup.jwid_parser import parse_jwid_results
from musicdb.lookup.scheduler import RateLimitedScheduler
from musicdb.lookup.types import Query, SourceId

logger = logging.getLogger(__name__)

JWID_BASE_URL = "https://www2.jasrac.or.jp/eJwid/"


def build_jwid_params(query: Query) -> dict[str, str]:
    """Map a query onto J-WID search form parameters."""
    params = {"title": query.title.strip()}
    if query.artist and query.artist.strip():
        params["artist"] = query.artist.strip()
    return params


class JwidAdapter:
    """Source adapter for J-WID, the authoritative source of work codes.

    The fetcher and scheduler are injected so that a single scheduler
    instance throttles every query made against J-WID in this process.
    """

    def __init__(
        self,
        fetcher: HtmlFetcher,
        scheduler: RateLimitedScheduler,
        *,
        base_url: str = JWID_BASE_URL,
    ) -> None:
        self._fetcher = fetcher
        self._scheduler = scheduler
        self._base_url = base_url

    @property
    def source(self) -> SourceId:
        return SourceId.JWID

    async def search(self, query: Query) -> list[RawCandidate]:
        """Search J-WID for a query; returns an empty list if J-WID is unavailable."""
        params = build_jwid_params(query)
        try:
            html = await self._scheduler.schedule(
                lambda: self._fetcher.fetch_html(self._base_url, params=params)
            )
        except SourceUnavailable as exc:
            logger.warning("J-WID search failed for title=%s: %s", query.title, exc)
            return []

        candidates = parse_jwid_results(html, self._base_url)
        logger.debug("J-WID returned %d candidate(s) for %r", len(candidates), query.title)
        return candidates
