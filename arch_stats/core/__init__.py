"""Core layer for the ArchStats report renderer.

This module provides the domain entities, the game catalogue and the
statistic normalization rules.
"""

from .entities import StatRecord, PlayerReport, LeaderboardEntry, LeaderboardReport, coerce_number
from .games import GameMode, StatRow, BEDWARS_ROWS, SECONDARY_GAMES
from .normalizer import normalize_stat, display_number, format_percentile
from .exceptions import (
    ArchStatsError,
    ApiError,
    RequestTimeoutError,
    InputError,
    NoDataError,
    RenderError,
    AssetNotFoundError,
)

__all__ = [
    "StatRecord",
    "PlayerReport",
    "LeaderboardEntry",
    "LeaderboardReport",
    "coerce_number",
    "GameMode",
    "StatRow",
    "BEDWARS_ROWS",
    "SECONDARY_GAMES",
    "normalize_stat",
    "display_number",
    "format_percentile",
    "ArchStatsError",
    "ApiError",
    "RequestTimeoutError",
    "InputError",
    "NoDataError",
    "RenderError",
    "AssetNotFoundError",
]
