"""Low-level drawing operations shared by all reports."""

from dataclasses import dataclass
from io import BytesIO
from typing import Tuple

from PIL import Image, ImageColor, ImageDraw

from .assets import FontBook

SHADOW_COLOR = (0, 0, 0, 255)
BAR_FILL_ALPHA = 0.8
BAR_OUTLINE_ALPHA = 0.4


@dataclass
class Canvas:
    """A private RGBA drawing surface and the fonts used on it."""

    image: Image.Image
    fonts: FontBook

    @classmethod
    def new(cls, width: int, height: int, fonts: FontBook) -> "Canvas":
        """Create an opaque black canvas."""
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 255)), fonts)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def rgba(color: str, alpha: float = 1.0) -> Tuple[int, int, int, int]:
    """Convert a CSS color string to an RGBA tuple with the given opacity."""
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, round(max(0.0, min(alpha, 1.0)) * 255))


def bar_fill_width(width: float, value: float, max_value: float) -> int:
    """Filled width of a bar track, never wider than the track."""
    if max_value <= 0:
        return 0
    ratio = max(0.0, min(value / max_value, 1.0))
    return round(width * ratio)


def draw_label(canvas: Canvas, text: str, x: float, y: float, size: int, color: str = "#ffffff") -> None:
    """Draw text with a 1px black drop shadow.

    ``y`` is the text baseline. Text is not wrapped or clipped.
    """
    draw = ImageDraw.Draw(canvas.image)
    font = canvas.fonts.get(size)
    draw.text((x + 1, y + 1), text, font=font, fill=SHADOW_COLOR, anchor="ls")
    draw.text((x, y), text, font=font, fill=rgba(color), anchor="ls")


def draw_panel(
    canvas: Canvas,
    x: float,
    y: float,
    w: float,
    h: float,
    color: str = "#1a1a1a",
    alpha: float = 0.7,
) -> None:
    """Blend a translucent rectangle onto the canvas."""
    w, h = round(w), round(h)
    if w <= 0 or h <= 0:
        return
    patch = Image.new("RGBA", (w, h), rgba(color, alpha))
    canvas.image.alpha_composite(patch, dest=(round(x), round(y)))


def fill_rect(canvas: Canvas, x: float, y: float, w: float, h: float, color: str) -> None:
    """Fill an opaque rectangle."""
    w, h = round(w), round(h)
    if w <= 0 or h <= 0:
        return
    draw = ImageDraw.Draw(canvas.image)
    draw.rectangle([round(x), round(y), round(x) + w - 1, round(y) + h - 1], fill=rgba(color))


def draw_bar(
    canvas: Canvas,
    x: float,
    y: float,
    w: float,
    h: float,
    value: float,
    max_value: float = 100,
    color: str = "#4ecdc4",
) -> None:
    """Draw a proportional bar against a fixed cap, with a faint track outline."""
    draw_panel(canvas, x, y, bar_fill_width(w, value, max_value), h, color, BAR_FILL_ALPHA)

    w, h = round(w), round(h)
    if w <= 0 or h <= 0:
        return
    outline = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    ImageDraw.Draw(outline).rectangle(
        [0, 0, w - 1, h - 1], outline=rgba(color, BAR_OUTLINE_ALPHA), width=1
    )
    canvas.image.alpha_composite(outline, dest=(round(x), round(y)))


def cover_crop_box(
    source_size: Tuple[int, int], target_size: Tuple[int, int]
) -> Tuple[float, float, float, float]:
    """Centered source region that covers the target when scaled.

    The scale factor is ``max(target_w / source_w, target_h / source_h)``.
    """
    source_w, source_h = source_size
    target_w, target_h = target_size
    scale = max(target_w / source_w, target_h / source_h)
    crop_w = target_w / scale
    crop_h = target_h / scale
    left = (source_w - crop_w) / 2
    top = (source_h - crop_h) / 2
    return (left, top, left + crop_w, top + crop_h)


def draw_cover_image(canvas: Canvas, image: Image.Image) -> None:
    """Scale an image to cover the whole canvas, cropping the overflow evenly."""
    box = cover_crop_box(image.size, (canvas.width, canvas.height))
    scaled = image.convert("RGBA").resize(
        (canvas.width, canvas.height), Image.Resampling.LANCZOS, box=box
    )
    canvas.image.alpha_composite(scaled)


def encode_png(canvas: Canvas) -> bytes:
    """Encode the canvas as PNG."""
    output = BytesIO()
    canvas.image.convert("RGB").save(output, format="PNG")
    return output.getvalue()
