"""Game catalogue and report row tables for ArchMC statistics."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class GameMode(Enum):
    """ArchMC game modes that have a lifetime wins leaderboard.

    Each game mode contains:
    - value: Key used by callers (slash command choice value)
    - label: Human readable name shown on reports
    """

    # Format: (key, label)
    BEDWARS = ("bedwars", "Bedwars")
    SKYWARS = ("skywars", "SkyWars")
    BRIDGES = ("bridges", "Bridges")
    STICKFIGHT = ("stickfight", "Stickfight")
    SUMO = ("sumo", "Sumo")
    BUILDUHC = ("builduhc", "BuildUHC")
    BEDFIGHT = ("bedfight", "Bedfight")
    BOXING = ("boxing", "Boxing")
    NODEBUFF = ("nodebuff", "NoDebuff")
    PEARL = ("pearl", "Pearl")
    SOUP = ("soup", "Soup")
    SPLEEF = ("spleef", "Spleef")
    GAPPLE = ("gapple", "Gapple")
    COMBO = ("combo", "Combo")

    def __init__(self, key: str, label: str):
        """Initialize game mode with metadata."""
        self._value_ = key
        self.label = label

    @property
    def stat_id(self) -> str:
        """Get the leaderboard statistic id for lifetime wins."""
        return wins_stat(self.value)

    @classmethod
    def from_key(cls, key: str) -> Optional["GameMode"]:
        """Convert a caller supplied key to a GameMode.

        Returns None for unknown keys.
        """
        if not key:
            return None
        normalized = key.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        return None


def wins_stat(game: str) -> str:
    """Build the lifetime wins stat key for a game."""
    return f"wins:{game}:global:lifetime"


@dataclass(frozen=True)
class StatRow:
    """One bar row on the player card."""

    label: str
    stat_key: str
    color: str
    bar_cap: float


# Left panel of the player card, drawn top to bottom.
BEDWARS_ROWS: Tuple[StatRow, ...] = (
    StatRow("Wins", "wins:bedwars:global:lifetime", "#4ecdc4", 300),
    StatRow("Kills", "kills:bedwars:global:lifetime", "#96ceb4", 500),
    StatRow("Deaths", "deaths:bedwars:global:lifetime", "#ff6b6b", 300),
    StatRow("Final Kills", "final_kills:bedwars:global:lifetime", "#a29bfe", 500),
)

# Right panel of the player card.
SECONDARY_GAME_CAP = 150

SECONDARY_GAMES: Tuple[StatRow, ...] = (
    StatRow("Stickfight", wins_stat("stickfight"), "#ff6b6b", SECONDARY_GAME_CAP),
    StatRow("Sumo", wins_stat("sumo"), "#4ecdc4", SECONDARY_GAME_CAP),
    StatRow("BuildUHC", wins_stat("builduhc"), "#45b7d1", SECONDARY_GAME_CAP),
    StatRow("SkyWars", wins_stat("skywars"), "#96ceb4", SECONDARY_GAME_CAP),
    StatRow("Bridges", wins_stat("bridges"), "#ffeaa7", SECONDARY_GAME_CAP),
    StatRow("Bedfight", wins_stat("bedfight"), "#dfe6e9", SECONDARY_GAME_CAP),
)
