"""Player stat card renderer."""

from io import BytesIO
from typing import Optional

import structlog
from PIL import Image

from arch_stats.core.entities import PlayerReport
from arch_stats.core.games import BEDWARS_ROWS, SECONDARY_GAMES
from arch_stats.core.normalizer import display_number, format_percentile, normalize_stat

from .base import HEADER_PANEL_COLOR, ROW_PANEL_COLOR, SECTION_PANEL_COLOR, ReportRenderer
from .primitives import Canvas, draw_bar, draw_label, draw_panel, encode_png, fill_rect

logger = structlog.get_logger()

AVATAR_BOX = (15, 12, 75)  # x, y, size
AVATAR_FALLBACK_COLOR = "#666666"
# Face region of a Minecraft skin texture.
SKIN_FACE_BOX = (8, 8, 16, 16)

SECTION_TOP = 120
SECTION_HEIGHT = 300


def decode_skin_face(texture: Optional[bytes], size: int) -> Optional[Image.Image]:
    """Cut the face out of a skin texture and scale it without smoothing.

    Returns:
        The scaled face, or None if the texture is missing or undecodable
    """
    if not texture:
        return None
    try:
        with Image.open(BytesIO(texture)) as skin:
            face = skin.convert("RGBA").crop(SKIN_FACE_BOX)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.warning("Skin texture could not be decoded", error=str(e))
        return None
    return face.resize((size, size), Image.Resampling.NEAREST)


class PlayerCardRenderer(ReportRenderer):
    """Renders the 1000x750 player stat card."""

    width = 1000
    height = 750
    footer_height = 50
    footer_text_x = 20
    footer_text_inset = 20

    def render(self, report: PlayerReport) -> bytes:
        """Render a player card to PNG bytes."""
        canvas = self.new_canvas()
        self.draw_background(canvas)
        self.draw_header(canvas, report)

        stats = report.statistics or {}
        logger.debug(
            "Rendering player card",
            username=report.username,
            bedwars_keys=[key for key in stats if "bedwars" in key][:10],
        )

        self.draw_bedwars_panel(canvas, stats)
        self.draw_other_games_panel(canvas, stats)
        self.draw_footer(canvas, f"ArchStats  {self.footer_credit}")
        return encode_png(canvas)

    def draw_header(self, canvas: Canvas, report: PlayerReport) -> None:
        """Draw the header band, avatar and username."""
        draw_panel(canvas, 0, 0, canvas.width, 100, HEADER_PANEL_COLOR, 0.8)

        x, y, size = AVATAR_BOX
        face = decode_skin_face(report.skin_texture, size)
        if face is None:
            fill_rect(canvas, x, y, size, size, AVATAR_FALLBACK_COLOR)
        else:
            canvas.image.alpha_composite(face, dest=(x, y))

        draw_label(canvas, report.username, 105, 65, 34, "#ffffff")

    def draw_bedwars_panel(self, canvas: Canvas, stats) -> None:
        """Draw the left panel with the fixed Bedwars rows."""
        draw_panel(canvas, 15, SECTION_TOP, 450, SECTION_HEIGHT, SECTION_PANEL_COLOR, 0.7)
        draw_label(canvas, "BEDWARS", 30, SECTION_TOP + 25, 22, "#ff6b6b")

        y = SECTION_TOP + 55
        for row in BEDWARS_ROWS:
            stat = normalize_stat(stats, row.stat_key)
            draw_panel(canvas, 25, y, 420, 38, ROW_PANEL_COLOR, 0.5)
            draw_label(canvas, row.label, 35, y + 25, 16, "#ffffff")
            draw_label(canvas, display_number(stat.value), 150, y + 25, 18, row.color)
            draw_bar(canvas, 230, y + 10, 195, 18, stat.value, row.bar_cap, row.color)
            y += 45

    def draw_other_games_panel(self, canvas: Canvas, stats) -> None:
        """Draw the right panel with one row per secondary game."""
        draw_panel(canvas, 480, SECTION_TOP, 505, SECTION_HEIGHT, SECTION_PANEL_COLOR, 0.7)
        draw_label(canvas, "OTHER GAMES", 495, SECTION_TOP + 25, 20, "#96ceb4")

        y = SECTION_TOP + 55
        for game in SECONDARY_GAMES:
            stat = normalize_stat(stats, game.stat_key)
            draw_panel(canvas, 490, y, 485, 35, ROW_PANEL_COLOR, 0.5)
            draw_label(canvas, game.label, 505, y + 23, 15, "#ffffff")
            draw_label(canvas, display_number(stat.value), 700, y + 23, 15, game.color)
            draw_label(canvas, format_percentile(stat.percentile), 760, y + 23, 13, "#aaffaa")
            draw_bar(canvas, 820, y + 8, 155, 19, stat.value, game.bar_cap, game.color)
            y += 42
