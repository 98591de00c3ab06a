"""Shared stages of every report: canvas, background and footer."""

from typing import Optional

import structlog
from PIL import Image

from .assets import FontBook
from .primitives import Canvas, draw_cover_image, draw_label, draw_panel, fill_rect

logger = structlog.get_logger()

FALLBACK_BACKGROUND = "#0a0e27"
OVERLAY_ALPHA = 0.35
HEADER_PANEL_COLOR = "#1a1a2e"
SECTION_PANEL_COLOR = "#16213e"
ROW_PANEL_COLOR = "#0f3460"
FOOTER_TEXT_COLOR = "#888888"


class ReportRenderer:
    """Base class for report renderers.

    Subclasses set ``width`` and ``height`` and implement ``render``.
    """

    width = 0
    height = 0
    footer_height = 40
    footer_text_x = 30
    footer_text_inset = 15

    def __init__(
        self,
        fonts: FontBook,
        background: Optional[Image.Image] = None,
        footer_credit: str = "Made by KessudMC",
    ):
        """Initialize the renderer.

        Args:
            fonts: Pixel font at any size
            background: Background image loaded at startup, or None
            footer_credit: Attribution caption drawn in the footer
        """
        self.fonts = fonts
        self.background = background
        self.footer_credit = footer_credit

    def new_canvas(self) -> Canvas:
        """Create the canvas for one report."""
        return Canvas.new(self.width, self.height, self.fonts)

    def draw_background(self, canvas: Canvas) -> None:
        """Draw the cover-scaled background (or flat color) and the dark overlay."""
        if self.background is None:
            fill_rect(canvas, 0, 0, canvas.width, canvas.height, FALLBACK_BACKGROUND)
        else:
            try:
                draw_cover_image(canvas, self.background)
            except (OSError, ValueError) as e:
                logger.warning("Background draw failed, using flat color", error=str(e))
                fill_rect(canvas, 0, 0, canvas.width, canvas.height, FALLBACK_BACKGROUND)

        draw_panel(canvas, 0, 0, canvas.width, canvas.height, "#000000", OVERLAY_ALPHA)

    def draw_footer(self, canvas: Canvas, caption: str) -> None:
        """Draw the footer band and its caption."""
        top = canvas.height - self.footer_height
        draw_panel(canvas, 0, top, canvas.width, self.footer_height, ROW_PANEL_COLOR, 0.6)
        draw_label(
            canvas,
            caption,
            self.footer_text_x,
            canvas.height - self.footer_text_inset,
            14,
            FOOTER_TEXT_COLOR,
        )
