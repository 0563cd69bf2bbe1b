from .canvas import RGBA, blend_mask, new_canvas
from .draw_text import RasterTextRenderer, draw_text, render_mask
from .fonts import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX, PillowGlyphMetrics, load_font, resolve_font_path

__all__ = [
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE_PX",
    "PillowGlyphMetrics",
    "RGBA",
    "RasterTextRenderer",
    "blend_mask",
    "draw_text",
    "load_font",
    "new_canvas",
    "render_mask",
    "resolve_font_path",
]
