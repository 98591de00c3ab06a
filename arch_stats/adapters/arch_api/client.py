"""ArchMC stats API client with response caching and error handling."""

import asyncio
from typing import Any, Optional
from urllib.parse import quote

import httpx
import structlog

from arch_stats.adapters.cache import CacheStore
from arch_stats.core.exceptions import ApiError, RequestTimeoutError

logger = structlog.get_logger()

ERROR_SNIPPET_LENGTH = 50


class ArchAPIClient:
    """ArchMC stats API client.

    Every request goes through an injected CacheStore keyed by the endpoint
    path including its query string.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        cache: Optional[CacheStore] = None,
        request_timeout: float = 10.0,
    ):
        """Initialize the stats API client.

        Args:
            api_key: Value sent in the X-API-KEY header
            base_url: Base URL for the API, without trailing slash
            cache: Response cache (a private one is created if omitted)
            request_timeout: Hard bound on each request in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.cache = cache if cache is not None else CacheStore()
        self.request_timeout = request_timeout
        self.client = httpx.AsyncClient(timeout=request_timeout)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def _make_request(self, url: str) -> Any:
        """Make a GET request to the stats API and return the parsed JSON.

        Raises:
            RequestTimeoutError: If the request did not finish in time
            ApiError: For non-2xx responses, malformed JSON or transport errors
        """
        headers = {"X-API-KEY": self.api_key, "Accept": "application/json"}

        try:
            response = await asyncio.wait_for(
                self.client.get(url, headers=headers), timeout=self.request_timeout
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Stats API request timed out", url=url, timeout=self.request_timeout)
            raise RequestTimeoutError(
                f"Request timed out after {self.request_timeout:g} seconds"
            )
        except httpx.RequestError as e:
            logger.error("HTTP request failed", url=url, error=str(e))
            raise ApiError(f"Request failed: {e}")

        if not 200 <= response.status_code < 300:
            snippet = (response.text or "unknown error")[:ERROR_SNIPPET_LENGTH]
            logger.error(
                "Stats API error",
                url=url,
                status_code=response.status_code,
                response=snippet,
            )
            raise ApiError(
                f"API {response.status_code}: {snippet}",
                status=response.status_code,
                body_snippet=snippet,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Stats API returned malformed JSON", url=url, error=str(e))
            raise ApiError(
                f"API {response.status_code}: malformed JSON",
                status=response.status_code,
            )

    async def fetch_cached(self, endpoint: str) -> Any:
        """Fetch an endpoint, serving it from the cache while fresh.

        Args:
            endpoint: Path and query relative to the API base, e.g.
                ``/leaderboards/wins:sumo:global:lifetime?page=0&size=10``

        Returns:
            Parsed JSON payload
        """
        cached = self.cache.get(endpoint)
        if cached is not None:
            logger.debug("Cache hit", endpoint=endpoint)
            return cached

        logger.info("Fetching from stats API", endpoint=endpoint)
        data = await self._make_request(f"{self.base_url}{endpoint}")
        self.cache.set(endpoint, data)
        return data

    async def fetch_player_stats(self, username: str) -> Any:
        """Get the statistics payload for a player.

        Args:
            username: Minecraft username

        Returns:
            Parsed JSON with a ``statistics`` mapping keyed by stat id
        """
        return await self.fetch_cached(f"/players/username/{quote(username, safe='')}/statistics")

    async def fetch_leaderboard(self, stat_id: str, page: int = 0, page_size: int = 10) -> Any:
        """Get one page of a leaderboard.

        Each page is cached independently.

        Args:
            stat_id: Statistic id, e.g. ``wins:bedwars:global:lifetime``
            page: Zero-based page index
            page_size: Entries per page

        Returns:
            Parsed JSON with ``entries`` and ``totalPlayers``
        """
        return await self.fetch_cached(f"/leaderboards/{stat_id}?page={page}&size={page_size}")
