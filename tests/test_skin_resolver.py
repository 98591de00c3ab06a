"""Tests for the Mojang skin resolver."""

import asyncio
import os
from unittest.mock import patch

import httpx
import pytest

from arch_stats.adapters.mojang import SkinResolver, SkinResult

from tests.arch_api_mocks import (
    ArchAPIMockData,
    MOJANG_API_URL,
    SESSION_SERVER_URL,
    SKIN_URL,
    MojangMockRouter,
    mock_successful_skin_lookup,
    mock_unknown_username,
)


@pytest.fixture
def fallback_skin(tmp_path):
    """A fallback skin file on disk."""
    path = tmp_path / "steve.png"
    path.write_bytes(b"fallback-bytes")
    return path


def make_resolver(fallback_path, request_timeout: float = 5.0) -> SkinResolver:
    return SkinResolver(
        fallback_path=str(fallback_path),
        mojang_api_url=MOJANG_API_URL,
        session_server_url=SESSION_SERVER_URL,
        request_timeout=request_timeout,
    )


class TestSkinResolver:
    """Test cases for SkinResolver."""

    def test_fallback_path_is_absolute(self):
        """Test that the fallback path does not depend on the working directory."""
        resolver = make_resolver("steve.jpg")
        assert resolver.fallback.is_fallback
        assert resolver.fallback.ref.endswith("steve.jpg")
        assert os.path.isabs(resolver.fallback.ref)

    @pytest.mark.asyncio
    async def test_resolve_success(self, fallback_skin):
        """Test the full username to texture URL chain."""
        async with make_resolver(fallback_skin) as resolver:
            with mock_successful_skin_lookup("Notch"):
                result = await resolver.resolve("Notch")

        assert result == SkinResult(ref=SKIN_URL, is_fallback=False)

    @pytest.mark.asyncio
    async def test_unknown_username_falls_back(self, fallback_skin):
        """Test that a 404 from the username lookup yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with mock_unknown_username("NoSuchPlayer"):
                result = await resolver.resolve("NoSuchPlayer")

        assert result.is_fallback
        assert result.ref == str(fallback_skin.resolve())

    @pytest.mark.asyncio
    async def test_missing_profile_falls_back(self, fallback_skin):
        """Test that a failed profile lookup yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_account("Notch")
                mocks.mock_profile(status_code=204, response_data={})
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_missing_textures_property_falls_back(self, fallback_skin):
        """Test that a profile without a textures property yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_account("Notch")
                mocks.mock_profile(response_data={"id": "x", "properties": []})
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_bad_base64_falls_back(self, fallback_skin):
        """Test that an undecodable textures value yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_account("Notch")
                mocks.mock_profile(
                    response_data={"properties": [{"name": "textures", "value": "!!not-base64!!"}]}
                )
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    @pytest.mark.parametrize("skin_url", [12345, "", None, {"href": SKIN_URL}])
    async def test_invalid_skin_url_falls_back(self, fallback_skin, skin_url):
        """Test that a textures blob without a usable URL yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_account("Notch")
                mocks.mock_profile(
                    response_data=ArchAPIMockData.get_profile_response(skin_url=skin_url)
                )
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_transport_error_falls_back(self, fallback_skin):
        """Test that a connection failure yields the fallback."""
        async with make_resolver(fallback_skin) as resolver:
            with patch.object(resolver.client, "get") as mock_get:
                mock_get.side_effect = httpx.ConnectError("Connection refused")
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, fallback_skin):
        """Test that a lookup chain running past the timeout yields the fallback."""
        async def slow_get(*args, **kwargs):
            await asyncio.sleep(1)

        async with make_resolver(fallback_skin, request_timeout=0.05) as resolver:
            with patch.object(resolver.client, "get", side_effect=slow_get):
                result = await resolver.resolve("Notch")

        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_load_texture_downloads_url(self, fallback_skin, skin_png):
        """Test that a resolved texture URL is downloaded."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_texture(skin_png)
                texture = await resolver.load_texture(SkinResult(ref=SKIN_URL))

        assert texture == skin_png

    @pytest.mark.asyncio
    async def test_load_texture_download_failure(self, fallback_skin):
        """Test that a failed texture download yields no bytes."""
        async with make_resolver(fallback_skin) as resolver:
            with MojangMockRouter() as mocks:
                mocks.mock_texture(b"", status_code=404)
                texture = await resolver.load_texture(SkinResult(ref=SKIN_URL))

        assert texture is None

    @pytest.mark.asyncio
    async def test_load_texture_reads_fallback_file(self, fallback_skin):
        """Test that the fallback result is read from disk."""
        async with make_resolver(fallback_skin) as resolver:
            texture = await resolver.load_texture(resolver.fallback)

        assert texture == b"fallback-bytes"

    @pytest.mark.asyncio
    async def test_load_texture_missing_fallback_file(self, tmp_path):
        """Test that a missing fallback file yields no bytes."""
        async with make_resolver(tmp_path / "missing.png") as resolver:
            texture = await resolver.load_texture(resolver.fallback)

        assert texture is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ref", [12345, "not a url"])
    async def test_load_texture_unusable_url(self, fallback_skin, ref):
        """Test that a texture reference httpx cannot request yields no bytes."""
        async with make_resolver(fallback_skin) as resolver:
            texture = await resolver.load_texture(SkinResult(ref=ref))

        assert texture is None
