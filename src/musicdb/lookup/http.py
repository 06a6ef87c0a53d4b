# ABOUTME: HTTP fetcher abstraction for catalog source requests.
# ABOUTME: One GET per call with fixed browser/locale headers, bounded timeout, injectable transport.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    ),
    "Accept-Language": "ja-JP,ja;q=0.9",
}


class SourceUnavailable(Exception):
    """Raised when a catalog source cannot be reached or answers with a non-2xx status."""


@runtime_checkable
class HtmlFetcher(Protocol):
    """Protocol for fetching an HTML document from a catalog source."""

    async def fetch_html(self, url: str, params: dict[str, str] | None = None) -> str: ...


class MusicdbHttpClient:
    """Async HTML fetcher for catalog sources.

    Wraps httpx.AsyncClient with the fixed identity/locale headers and a
    bounded timeout. There is no retry: a failed request raises
    SourceUnavailable and the calling adapter decides what to do with it.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": _DEFAULT_HEADERS,
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def fetch_html(self, url: str, params: dict[str, str] | None = None) -> str:
        """Send a GET request and return the response body as text.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            The decoded response body.

        Raises:
            SourceUnavailable: On transport errors, timeouts, or non-2xx statuses.
        """
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise SourceUnavailable(f"Request failed: {url}: {exc}") from exc

        if not response.is_success:
            raise SourceUnavailable(f"HTTP {response.status_code} from {url}")

        logger.debug("Fetched %s (%d bytes)", response.url, len(response.content))
        return response.text

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "MusicdbHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
