"""Minecraft skin resolution via the Mojang profile APIs."""

import asyncio
import base64
import binascii
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class SkinResult:
    """Outcome of a skin lookup.

    ``ref`` is the texture URL when the lookup succeeded, otherwise the path of
    the local fallback skin.
    """

    ref: str
    is_fallback: bool = False


class SkinLookupError(Exception):
    """A step of the skin lookup chain failed."""

    pass


# Everything a lookup step can raise on bad upstream data or transport problems.
_LOOKUP_ERRORS = (
    SkinLookupError,
    httpx.HTTPError,
    asyncio.TimeoutError,
    binascii.Error,
    ValueError,
    KeyError,
    AttributeError,
    TypeError,
)


class SkinResolver:
    """Resolves a Minecraft username to its skin texture.

    Lookups never raise; any failure resolves to the fallback skin.
    """

    def __init__(
        self,
        fallback_path: str,
        mojang_api_url: str = "https://api.mojang.com",
        session_server_url: str = "https://sessionserver.mojang.com",
        request_timeout: float = 5.0,
    ):
        """Initialize the skin resolver.

        Args:
            fallback_path: Local image used when the lookup fails
            mojang_api_url: Base URL of the username to UUID API
            session_server_url: Base URL of the session server profile API
            request_timeout: Shared bound for the whole lookup chain in seconds
        """
        self.fallback_path = str(Path(fallback_path).resolve())
        self.mojang_api_url = mojang_api_url.rstrip("/")
        self.session_server_url = session_server_url.rstrip("/")
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

    @property
    def fallback(self) -> SkinResult:
        """The result returned when a lookup fails."""
        return SkinResult(ref=self.fallback_path, is_fallback=True)

    async def _get_json(self, url: str, not_found_message: str) -> Dict[str, Any]:
        response = await self.client.get(url)
        if response.status_code != 200:
            raise SkinLookupError(f"{not_found_message} (status {response.status_code})")
        return response.json()

    async def _lookup_skin_url(self, username: str) -> str:
        """Run both lookups and return the skin texture URL."""
        account = await self._get_json(
            f"{self.mojang_api_url}/users/profiles/minecraft/{quote(username, safe='')}",
            "Not found",
        )
        uuid = account["id"]

        profile = await self._get_json(
            f"{self.session_server_url}/session/minecraft/profile/{quote(uuid, safe='')}",
            "No profile",
        )

        texture = next(
            (prop for prop in profile.get("properties", []) if prop.get("name") == "textures"),
            None,
        )
        if texture is None:
            raise SkinLookupError("No texture")

        decoded = json.loads(base64.b64decode(texture["value"]))
        url = decoded["textures"]["SKIN"]["url"]
        if not isinstance(url, str) or not url:
            raise SkinLookupError("Invalid skin URL")
        return url

    async def resolve(self, username: str) -> SkinResult:
        """Resolve a username to its skin, falling back to the local skin.

        Args:
            username: Minecraft username

        Returns:
            SkinResult with the texture URL, or the fallback result
        """
        try:
            url = await asyncio.wait_for(
                self._lookup_skin_url(username), timeout=self.request_timeout
            )
        except _LOOKUP_ERRORS as e:
            logger.info(
                "Skin lookup failed, using fallback",
                username=username,
                error=str(e) or type(e).__name__,
            )
            return self.fallback

        logger.debug("Resolved skin", username=username, url=url)
        return SkinResult(ref=url)

    async def load_texture(self, result: SkinResult) -> Optional[bytes]:
        """Load the raw image bytes behind a skin result.

        Returns:
            Image bytes, or None if they could not be loaded
        """
        if result.is_fallback:
            try:
                return await asyncio.to_thread(Path(result.ref).read_bytes)
            except OSError as e:
                logger.warning("Fallback skin unreadable", path=result.ref, error=str(e))
                return None

        try:
            response = await asyncio.wait_for(
                self.client.get(result.ref), timeout=self.request_timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError, TypeError) as e:
            logger.warning("Skin texture download failed", url=result.ref, error=str(e))
            return None

        if response.status_code != 200:
            logger.warning(
                "Skin texture download failed", url=result.ref, status_code=response.status_code
            )
            return None
        return response.content
