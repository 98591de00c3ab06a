"""Font and background asset loading."""

import os
from typing import Dict, Optional

import structlog
from PIL import Image, ImageFont

from arch_stats.core.exceptions import AssetNotFoundError

logger = structlog.get_logger()


class FontBook:
    """Pixel font loaded at the sizes reports ask for.

    With no path the scalable Pillow default font is used, which keeps
    rendering usable where the font asset is not shipped (e.g. tests).
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._fonts: Dict[int, ImageFont.FreeTypeFont] = {}

    @classmethod
    def from_file(cls, path: str) -> "FontBook":
        """Load the font asset, failing if it is absent or unreadable.

        Raises:
            AssetNotFoundError: If the font cannot be loaded
        """
        if not os.path.isfile(path):
            raise AssetNotFoundError(f"Font not found: {os.path.abspath(path)}")

        book = cls(path)
        try:
            book.get(16)
        except OSError as e:
            raise AssetNotFoundError(f"Font unreadable: {os.path.abspath(path)} ({e})")

        logger.info("Loaded font", path=os.path.abspath(path))
        return book

    def get(self, size: int) -> ImageFont.FreeTypeFont:
        """Get the font at a pixel size."""
        font = self._fonts.get(size)
        if font is None:
            if self.path:
                font = ImageFont.truetype(self.path, size)
            else:
                font = ImageFont.load_default(size=size)
            self._fonts[size] = font
        return font


def load_background(path: Optional[str]) -> Optional[Image.Image]:
    """Load the optional background image.

    Returns:
        The decoded image, or None if it is absent or corrupt
    """
    if not path or not os.path.exists(path):
        logger.info("No background image, using flat color", path=path)
        return None

    try:
        with Image.open(path) as img:
            background = img.convert("RGBA")
    except OSError as e:
        logger.warning("Background image unreadable, using flat color", path=path, error=str(e))
        return None

    logger.info("Loaded background", path=path, width=background.width, height=background.height)
    return background
