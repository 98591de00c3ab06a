"""Normalization of raw statistic entries returned by the stats API."""

from typing import Any, Mapping, Union

from .entities import StatRecord, coerce_number


def normalize_stat(statistics: Any, key: str) -> StatRecord:
    """Extract a StatRecord for ``key`` from a raw statistics mapping.

    Upstream payloads do not include every stat key for every player, so this
    never raises: anything that is not a mapping yields the all-zero record.
    Numeric strings are accepted; absent, non-numeric or non-finite fields
    default to 0.
    """
    if not isinstance(statistics, Mapping):
        return StatRecord()

    raw = statistics.get(key)
    if not isinstance(raw, Mapping):
        return StatRecord()

    return StatRecord(
        value=coerce_number(raw.get("value")),
        percentile=coerce_number(raw.get("percentile")),
        position=int(coerce_number(raw.get("position"))),
        total_players=int(coerce_number(raw.get("totalPlayers"))),
    )


def display_number(value: Union[int, float]) -> str:
    """Format a stat value for display.

    Integral floats are shown without a decimal part.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_percentile(percentile: float) -> str:
    """Format a 0..1 percentile as a percentage with one decimal place."""
    return f"{percentile * 100:.1f}%"
