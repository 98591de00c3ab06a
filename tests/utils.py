"""Test utilities for inspecting rendered reports."""

from io import BytesIO
from typing import List

from PIL import Image


def decode_png(data: bytes) -> Image.Image:
    """Decode PNG bytes into an RGB image."""
    return Image.open(BytesIO(data)).convert("RGB")


def drawn_texts(mock_draw_label) -> List[str]:
    """Texts passed to a patched draw_label, in call order."""
    return [call.args[1] for call in mock_draw_label.call_args_list]


def panel_calls_at(mock_draw_panel, x: float) -> list:
    """Calls to a patched draw_panel whose left edge is ``x``."""
    return [call for call in mock_draw_panel.call_args_list if call.args[1] == x]
