"""Report generation use cases: fetch, normalize and render."""

import asyncio
import contextlib
import time
from typing import Callable, Mapping, TypeVar

import structlog

from arch_stats.config import Config
from arch_stats.adapters.arch_api import ArchAPIClient
from arch_stats.adapters.cache import CacheStore
from arch_stats.adapters.mojang import SkinResolver
from arch_stats.adapters.rendering import (
    FontBook,
    LeaderboardRenderer,
    PlayerCardRenderer,
    load_background,
)
from arch_stats.core.entities import LeaderboardReport, PlayerReport
from arch_stats.core.exceptions import ArchStatsError, InputError, NoDataError, RenderError
from arch_stats.core.games import GameMode

logger = structlog.get_logger()

T = TypeVar("T")

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 16
MAX_PAGE_SIZE = 10
FAILURE_MESSAGE_LENGTH = 80


def validate_username(username: str) -> str:
    """Strip and length-check a Minecraft username.

    Raises:
        InputError: If the username is not 3-16 characters
    """
    username = (username or "").strip()
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise InputError(
            f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters."
        )
    return username


def describe_failure(error: Exception) -> str:
    """Short user-facing text for a failed report."""
    if isinstance(error, (InputError, NoDataError)):
        return str(error)
    return f"Error: {str(error)[:FAILURE_MESSAGE_LENGTH]}"


class ReportService:
    """Generates player cards and leaderboard boards as PNG bytes."""

    def __init__(
        self,
        stats_client: ArchAPIClient,
        skin_resolver: SkinResolver,
        player_renderer: PlayerCardRenderer,
        leaderboard_renderer: LeaderboardRenderer,
        default_page_size: int = 10,
    ):
        """Initialize the report service.

        Args:
            stats_client: Cached stats API client
            skin_resolver: Skin lookup with fallback
            player_renderer: Player card renderer
            leaderboard_renderer: Leaderboard renderer
            default_page_size: Page size used when the caller gives none
        """
        self.stats_client = stats_client
        self.skin_resolver = skin_resolver
        self.player_renderer = player_renderer
        self.leaderboard_renderer = leaderboard_renderer
        self.default_page_size = default_page_size

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP clients."""
        await self.stats_client.close()
        await self.skin_resolver.close()

    async def _render(self, kind: str, render: Callable[..., T], *args) -> T:
        """Run a renderer in a worker thread.

        Raises:
            RenderError: If composition fails unexpectedly
        """
        start_time = time.perf_counter()
        try:
            image = await asyncio.to_thread(render, *args)
        except ArchStatsError:
            raise
        except Exception as e:
            logger.error("Report rendering failed", kind=kind, error=str(e), exc_info=True)
            raise RenderError(f"Failed to render {kind}: {e}") from e

        logger.info(
            "Rendered report",
            kind=kind,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return image

    async def generate_player_report(self, username: str) -> bytes:
        """Render the stat card for a player.

        Args:
            username: Minecraft username, 3-16 characters

        Returns:
            PNG bytes

        Raises:
            InputError: If the username fails validation
            NoDataError: If the player has no statistics
            ApiError: If the stats API fails
            RequestTimeoutError: If the stats API does not answer in time
            RenderError: If composition fails unexpectedly
        """
        username = validate_username(username)
        logger.info("Generating player report", username=username)

        skin_task = asyncio.ensure_future(self.skin_resolver.resolve(username))
        try:
            player_data, skin = await asyncio.gather(
                self.stats_client.fetch_player_stats(username), skin_task
            )
        except BaseException:
            # The skin lookup must not outlive the clients it uses.
            skin_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await skin_task
            raise

        statistics = player_data.get("statistics") if isinstance(player_data, Mapping) else None
        if not statistics or not isinstance(statistics, Mapping):
            raise NoDataError(f"No stats found for **{username}**.")

        texture = await self.skin_resolver.load_texture(skin)
        report = PlayerReport(username=username, statistics=statistics, skin_texture=texture)
        return await self._render("player card", self.player_renderer.render, report)

    async def generate_leaderboard_report(
        self, game_key: str, page: int = 0, page_size: int = None
    ) -> bytes:
        """Render one page of a game's lifetime wins leaderboard.

        Args:
            game_key: Game key such as ``bedwars``
            page: Zero-based page index
            page_size: Entries per page, at most 10

        Returns:
            PNG bytes

        Raises:
            InputError: If the game, page or page size is invalid
            NoDataError: If the API returned no leaderboard
            ApiError: If the stats API fails
            RequestTimeoutError: If the stats API does not answer in time
            RenderError: If composition fails unexpectedly
        """
        mode = GameMode.from_key(game_key)
        if mode is None:
            raise InputError(f"Unknown game: {game_key}")

        if page_size is None:
            page_size = self.default_page_size
        if page < 0:
            raise InputError("Page must not be negative.")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InputError(f"Page size must be between 1 and {MAX_PAGE_SIZE}.")

        logger.info("Generating leaderboard report", game=mode.value, page=page, page_size=page_size)

        payload = await self.stats_client.fetch_leaderboard(mode.stat_id, page, page_size)
        if not isinstance(payload, Mapping) or payload.get("entries") is None:
            raise NoDataError(f"No leaderboard data found for **{mode.value}**.")

        report = LeaderboardReport.from_payload(mode.label, payload)
        return await self._render("leaderboard", self.leaderboard_renderer.render, report)


def create_report_service(config: Config) -> ReportService:
    """Factory function to build the report service from configuration.

    Loads the assets once; a missing font is fatal.

    Args:
        config: Application configuration

    Returns:
        ReportService wired with real clients and renderers

    Raises:
        AssetNotFoundError: If the font asset is missing
    """
    fonts = FontBook.from_file(config.font_path)
    background = load_background(config.background_path)

    cache = CacheStore(ttl_seconds=config.cache_ttl_seconds)
    stats_client = ArchAPIClient(
        api_key=config.api_key,
        base_url=config.api_base,
        cache=cache,
        request_timeout=config.api_timeout_seconds,
    )
    skin_resolver = SkinResolver(
        fallback_path=config.fallback_skin_path,
        mojang_api_url=config.mojang_api_url,
        session_server_url=config.session_server_url,
        request_timeout=config.skin_timeout_seconds,
    )

    logger.info("Creating report service", api_base=config.api_base)
    return ReportService(
        stats_client=stats_client,
        skin_resolver=skin_resolver,
        player_renderer=PlayerCardRenderer(fonts, background, config.footer_credit),
        leaderboard_renderer=LeaderboardRenderer(fonts, background, config.footer_credit),
        default_page_size=config.leaderboard_page_size,
    )
