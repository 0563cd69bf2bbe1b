from __future__ import annotations

from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw

from .canvas import RGBA, blend_mask
from .fonts import PillowFont, PillowGlyphMetrics


class RasterTextRenderer:
    """Draws text onto an RGBA numpy canvas at baseline-relative positions."""

    def __init__(self, canvas: np.ndarray, metrics: PillowGlyphMetrics, color: RGBA = (255, 255, 255, 255)) -> None:
        self.canvas = canvas
        self.metrics = metrics
        self.color = color
        self.draw_calls = 0

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.draw_calls += 1
        draw_text(self.canvas, x, y, text, self.color, font=self.metrics.font, ascent=self.metrics.font_metrics().ascent)


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font: PillowFont,
    ascent: float,
) -> None:
    """Blends `text` so its pen origin sits at `x` and its baseline at `y`."""
    if not text or text.isspace():
        return
    left, top, _, _ = font.getbbox(text)
    mask = render_mask(text, font)
    blend_mask(dst, int(round(x + left)), int(round(y - ascent + top)), mask, color)


@lru_cache(maxsize=256)
def render_mask(text: str, font: PillowFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)
