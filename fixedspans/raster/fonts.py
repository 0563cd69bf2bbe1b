from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

from PIL import ImageFont

from fixedspans.layout import FontMetrics


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX = 16.0
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "helvetica",
    "arial",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)

PillowFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


class PillowGlyphMetrics:
    """Glyph metrics backed by a Pillow font.

    `font_path` wins over family lookup; when neither resolves, Pillow's
    built-in default font is used.
    """

    def __init__(
        self,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size_px: float = DEFAULT_FONT_SIZE_PX,
        *,
        font_path: str | None = None,
    ) -> None:
        if font_size_px <= 0:
            raise ValueError("font_size_px must be > 0")
        self.font_family = font_family
        self.font_size_px = font_size_px
        self.font_path = font_path
        self.font = load_font(font_family, font_size_px, font_path)

    def natural_width(self, text: str) -> float:
        if not text:
            return 0.0
        return float(self.font.getlength(text))

    def font_metrics(self) -> FontMetrics:
        if isinstance(self.font, ImageFont.FreeTypeFont):
            ascent, descent = self.font.getmetrics()
            return FontMetrics(ascent=float(ascent), descent=float(descent))
        _, top, _, bottom = self.font.getbbox("Ag")
        return FontMetrics(ascent=float(bottom - top), descent=0.0)


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size_px: float, font_path: str | None = None) -> PillowFont:
    size = max(1, int(round(font_size_px)))
    resolved = Path(font_path) if font_path is not None else resolve_font_path(font_family)
    if resolved is None:
        LOGGER.warning("no font file found for %r; using Pillow default font", font_family)
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(resolved), size=size)
    except OSError as exc:
        LOGGER.warning("failed to load font %s (%s); using Pillow default font", resolved, exc)
        return ImageFont.load_default()


def resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            if p in stem:
                return path
    return None
