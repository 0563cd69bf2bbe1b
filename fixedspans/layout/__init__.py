"""Line layout core: width normalization and justification."""

from .contracts import (
    DEFAULT_DELIMITER_CHARACTERS,
    DEFAULT_NUMERAL_CHARACTERS,
    DEFAULT_WHITESPACE_WEIGHT,
    JUSTIFY_MODES,
    CharacterClass,
    ClassWidths,
    FontMetrics,
    GlyphMetricsProvider,
    GlyphPlacement,
    JustificationSpec,
    JustifyMode,
    LayoutResult,
    TextRenderer,
    WidthPolicy,
    classify_character,
    max_character_width,
)
from .engine import LineLayoutEngine, strip_trailing_whitespace

__all__ = [
    "CharacterClass",
    "ClassWidths",
    "DEFAULT_DELIMITER_CHARACTERS",
    "DEFAULT_NUMERAL_CHARACTERS",
    "DEFAULT_WHITESPACE_WEIGHT",
    "FontMetrics",
    "GlyphMetricsProvider",
    "GlyphPlacement",
    "JUSTIFY_MODES",
    "JustificationSpec",
    "JustifyMode",
    "LayoutResult",
    "LineLayoutEngine",
    "TextRenderer",
    "WidthPolicy",
    "classify_character",
    "max_character_width",
    "strip_trailing_whitespace",
]
