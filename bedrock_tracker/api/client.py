"""
Async client for the Minecraft services download-links API.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from bedrock_tracker.exceptions import FetchError
from bedrock_tracker.models.config import DEFAULT_API_URL, DEFAULT_USER_AGENT

log = logging.getLogger(__name__)


def parse_links_payload(payload: Any) -> Dict[str, str]:
    """
    Flattens an API payload into a mapping of downloadType to downloadUrl.

    Expects the shape ``{"result": {"links": [{"downloadType": ..., "downloadUrl":
    ...}, ...]}}``. Entries missing either field are skipped; a later entry for
    the same downloadType wins.

    Raises:
        FetchError: If the payload has no ``result.links`` list.
    """
    result = payload.get("result") if isinstance(payload, dict) else None
    links = result.get("links") if isinstance(result, dict) else None
    if not isinstance(links, list):
        raise FetchError("Unexpected API response: missing 'result.links' list.")

    urls: Dict[str, str] = {}
    for link in links:
        if not isinstance(link, dict):
            continue
        download_type = link.get("downloadType")
        download_url = link.get("downloadUrl")
        if isinstance(download_type, str) and isinstance(download_url, str):
            urls[download_type] = download_url
    return urls


class BedrockLinksClient:
    """
    Fetches the current Bedrock server download links.

    A single GET per call, no retries. Use as an async context manager or call
    `close()` when done.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = 30,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initializes the API client.

        Args:
            api_url: The download-links endpoint.
            user_agent: Sent as the User-Agent header; the endpoint rejects
            some non-browser agents.
            timeout: Total request timeout in seconds.
            session: An existing session to use instead of creating one.
        """
        self.api_url = api_url
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "BedrockLinksClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _initialize_session(self) -> None:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"User-Agent": self.user_agent},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
            self._owns_session = True

    async def close(self) -> None:
        """Gracefully closes the aiohttp session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def fetch_payload(self) -> Dict[str, Any]:
        """Performs the GET request and returns the decoded JSON body."""
        await self._initialize_session()
        log.debug(f"Fetching download links from {self.api_url}")
        try:
            async with self._session.get(self.api_url) as r:
                r.raise_for_status()
                return await r.json(content_type=None)
        except aiohttp.ClientResponseError as e:
            raise FetchError(
                f"API request failed with status {e.status}: {e.message}",
                url=self.api_url,
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            reason = str(e) or type(e).__name__
            raise FetchError(
                f"Could not reach the download-links API: {reason}",
                url=self.api_url,
            ) from e
        except ValueError as e:
            raise FetchError(
                f"API returned a response that is not valid JSON: {e}",
                url=self.api_url,
            ) from e

    async def fetch_links(self) -> Dict[str, str]:
        """Fetches the API payload and returns its downloadType to URL mapping."""
        payload = await self.fetch_payload()
        try:
            links = parse_links_payload(payload)
        except FetchError as e:
            e.url = self.api_url
            raise
        log.debug(f"Received {len(links)} download links.")
        return links
