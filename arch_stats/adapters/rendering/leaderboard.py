"""Leaderboard board renderer."""

import structlog

from arch_stats.core.entities import LeaderboardReport
from arch_stats.core.normalizer import display_number

from .base import HEADER_PANEL_COLOR, ROW_PANEL_COLOR, SECTION_PANEL_COLOR, ReportRenderer
from .primitives import Canvas, draw_label, draw_panel, encode_png

logger = structlog.get_logger()

GOLD = "#ffd700"
SILVER = "#c0c0c0"
BRONZE = "#cd7f32"
DEFAULT_RANK_COLOR = "#aaffaa"

RANK_COLORS = {1: GOLD, 2: SILVER, 3: BRONZE}

COLUMN_HEADER_Y = 100
ROW_HEIGHT = 60
BAR_X = 760
BAR_MAX_WIDTH = 150
# Denominator used when the top entry has no value.
DEFAULT_TOP_VALUE = 100
USERNAME_MAX_LENGTH = 20


def rank_color(position: int) -> str:
    """Color for a rank: gold, silver and bronze for the podium."""
    return RANK_COLORS.get(position, DEFAULT_RANK_COLOR)


def leaderboard_bar_width(value: float, top_value: float, max_width: float = BAR_MAX_WIDTH) -> float:
    """Bar width relative to the top-ranked entry's value."""
    denominator = top_value or DEFAULT_TOP_VALUE
    width = value * max_width / denominator
    return max(0.0, min(width, max_width))


class LeaderboardRenderer(ReportRenderer):
    """Renders the 900x800 leaderboard board."""

    width = 900
    height = 800

    def render(self, report: LeaderboardReport) -> bytes:
        """Render a leaderboard page to PNG bytes."""
        canvas = self.new_canvas()
        self.draw_background(canvas)

        draw_panel(canvas, 0, 0, canvas.width, 80, HEADER_PANEL_COLOR, 0.8)
        draw_label(canvas, f"{report.game_label} Leaderboard", 30, 60, 36, "#4ecdc4")

        self.draw_column_headers(canvas)

        if report.is_empty:
            logger.info("Leaderboard has no entries", game=report.game_label)
            draw_label(canvas, "No leaderboard data found", 30, 250, 24, "#ff6b6b")
            return encode_png(canvas)

        self.draw_rows(canvas, report)
        self.draw_footer(
            canvas, f"Total Players: {report.total_players:,}  {self.footer_credit} "
        )
        return encode_png(canvas)

    def draw_column_headers(self, canvas: Canvas) -> None:
        """Draw the Rank / Player / Wins header row."""
        draw_panel(canvas, 15, COLUMN_HEADER_Y, canvas.width - 30, 40, SECTION_PANEL_COLOR, 0.7)
        draw_label(canvas, "Rank", 35, COLUMN_HEADER_Y + 28, 16, "#aaffaa")
        draw_label(canvas, "Player", 120, COLUMN_HEADER_Y + 28, 16, "#aaffaa")
        draw_label(canvas, "Wins", 700, COLUMN_HEADER_Y + 28, 16, "#aaffaa")

    def draw_rows(self, canvas: Canvas, report: LeaderboardReport) -> None:
        """Draw one row per entry in the order given."""
        top_value = report.entries[0].value
        y = COLUMN_HEADER_Y + 50

        for index, entry in enumerate(report.entries):
            if index % 2 == 0:
                draw_panel(canvas, 15, y - 5, canvas.width - 30, ROW_HEIGHT - 5, ROW_PANEL_COLOR, 0.3)

            color = rank_color(entry.position)
            draw_label(canvas, f"#{entry.position}", 35, y + 20, 18, color)
            draw_label(canvas, entry.username[:USERNAME_MAX_LENGTH], 120, y + 20, 18, "#ffffff")
            draw_label(canvas, display_number(entry.value), 700, y + 20, 18, "#96ceb4")
            draw_panel(canvas, BAR_X, y + 5, leaderboard_bar_width(entry.value, top_value), 28, color, 0.7)

            y += ROW_HEIGHT
