# ABOUTME: NexTone source adapter.
# ABOUTME: Builds a keyword search, fetches through the NexTone scheduler, and parses result items.

import logging

from musicdb.lookup.candidate import RawCandidate
from musicdb.lookup.http import HtmlFetcher, SourceUnavailable
from musicdb.lookup.nextone_parser import parse_nextone_results
from musicdb.lookup.scheduler import RateLimitedScheduler
from musicdb.lookup.types import Query, SourceId

logger = logging.getLogger(__name__)

NEXTONE_BASE_URL = "https://search.nex-tone.co.jp/"


def build_nextone_params(query: Query) -> dict[str, str]:
    """NexTone takes a single free-text keyword: title, then artist if given."""
    terms = [query.title.strip()]
    if query.artist and query.artist.strip():
        terms.append(query.artist.strip())
    return {"keyword": " ".join(terms)}


class NextoneAdapter:
    """Source adapter for the NexTone catalog search."""

    def __init__(
        self,
        fetcher: HtmlFetcher,
        scheduler: RateLimitedScheduler,
        *,
        base_url: str = NEXTONE_BASE_URL,
    ) -> None:
        self._fetcher = fetcher
        self._scheduler = scheduler
        self._base_url = base_url

    @property
    def source(self) -> SourceId:
        return SourceId.NEXTONE

    async def search(self, query: Query) -> list[RawCandidate]:
        params = build_nextone_params(query)
        try:
            html = await self._scheduler.schedule(
                lambda: self._fetcher.fetch_html(self._base_url, params=params)
            )
        except SourceUnavailable as exc:
            logger.warning("NexTone search failed for title=%s: %s", query.title, exc)
            return []

        return parse_nextone_results(html, self._base_url)
