"""Image rendering adapter package.

This package composes report images with Pillow.
"""

from .assets import FontBook, load_background
from .primitives import (
    Canvas,
    bar_fill_width,
    cover_crop_box,
    draw_bar,
    draw_label,
    draw_panel,
    encode_png,
    fill_rect,
)
from .player_card import PlayerCardRenderer
from .leaderboard import LeaderboardRenderer, leaderboard_bar_width, rank_color

__all__ = [
    # Assets
    "FontBook",
    "load_background",
    # Primitives
    "Canvas",
    "bar_fill_width",
    "cover_crop_box",
    "draw_bar",
    "draw_label",
    "draw_panel",
    "encode_png",
    "fill_rect",
    # Renderers
    "PlayerCardRenderer",
    "LeaderboardRenderer",
    "leaderboard_bar_width",
    "rank_color",
]
