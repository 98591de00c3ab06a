"""Shared pytest fixtures for ArchStats tests."""

from io import BytesIO

import pytest
from PIL import Image

from arch_stats.adapters.rendering import FontBook, LeaderboardRenderer, PlayerCardRenderer


@pytest.fixture
def font_book():
    """Pillow's built-in scalable font; the pixel font asset is not shipped with tests."""
    return FontBook(None)


@pytest.fixture
def player_renderer(font_book):
    """Player card renderer on the flat fallback background."""
    return PlayerCardRenderer(font_book)


@pytest.fixture
def leaderboard_renderer(font_book):
    """Leaderboard renderer on the flat fallback background."""
    return LeaderboardRenderer(font_book)


@pytest.fixture
def skin_png():
    """A 64x64 skin texture whose face region is solid red."""
    skin = Image.new("RGBA", (64, 64), (0, 0, 255, 255))
    skin.paste((255, 0, 0, 255), (8, 8, 16, 16))
    output = BytesIO()
    skin.save(output, format="PNG")
    return output.getvalue()


@pytest.fixture
def player_stats_payload():
    """Stats API response for a player with a single Bedwars stat."""
    return {
        "statistics": {
            "wins:bedwars:global:lifetime": {
                "value": 42,
                "percentile": 0.9,
                "position": 10,
                "totalPlayers": 1000,
            }
        }
    }


@pytest.fixture
def leaderboard_payload():
    """Stats API response for one leaderboard page."""
    return {
        "entries": [
            {"position": 1, "username": "A", "value": 200},
            {"position": 2, "username": "B", "value": 160},
            {"position": 3, "username": "C", "value": 100},
        ],
        "totalPlayers": 5000,
    }
