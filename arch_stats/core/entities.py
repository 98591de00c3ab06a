"""Core entities for the ArchStats report renderer."""

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

Number = Union[int, float]


def coerce_number(raw: Any) -> Number:
    """Read an upstream numeric field, accepting numeric strings.

    Anything missing, non-numeric or non-finite reads as 0. Integral values
    come back as ``int``.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    try:
        number = float(raw)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


@dataclass(frozen=True)
class StatRecord:
    """A single statistic series for one player.

    Always fully populated; missing upstream fields are zero.
    """

    value: float = 0
    percentile: float = 0
    position: int = 0
    total_players: int = 0


@dataclass
class PlayerReport:
    """Input for one player stat card."""

    username: str
    statistics: Mapping[str, Any] = field(default_factory=dict)
    skin_texture: Optional[bytes] = None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One ranked row of a leaderboard page."""

    position: int
    username: str
    value: float

    @classmethod
    def from_payload(cls, payload: Any) -> "LeaderboardEntry":
        """Build an entry from a raw API entry, tolerating missing fields."""
        if not isinstance(payload, Mapping):
            return cls(position=0, username="Unknown", value=0)
        return cls(
            position=int(coerce_number(payload.get("position"))),
            username=str(payload.get("username") or "Unknown"),
            value=coerce_number(payload.get("value")),
        )


@dataclass
class LeaderboardReport:
    """Input for one leaderboard board.

    Entries keep the order returned by the API.
    """

    game_label: str
    entries: Tuple[LeaderboardEntry, ...] = ()
    total_players: int = 0

    @classmethod
    def from_payload(cls, game_label: str, payload: Mapping[str, Any]) -> "LeaderboardReport":
        """Build a report from the raw leaderboard response."""
        raw_entries = payload.get("entries")
        if not isinstance(raw_entries, (list, tuple)):
            raw_entries = ()
        return cls(
            game_label=game_label,
            entries=tuple(LeaderboardEntry.from_payload(entry) for entry in raw_entries),
            total_players=int(coerce_number(payload.get("totalPlayers"))),
        )

    @property
    def is_empty(self) -> bool:
        """Check if the page has no entries to draw."""
        return not self.entries
