"""Fixed-width, tabular and justified text layout."""

from .host import JustifiedParagraph, LineLayout, ParagraphLayout, break_lines, load_paragraph_config
from .layout import (
    CharacterClass,
    FontMetrics,
    GlyphMetricsProvider,
    GlyphPlacement,
    JustificationSpec,
    JustifyMode,
    LayoutResult,
    LineLayoutEngine,
    TextRenderer,
    WidthPolicy,
)
from .spans import JustifySpan, MonospaceSpan, ReplacementSpan, TabularSpan

__all__ = [
    "CharacterClass",
    "FontMetrics",
    "GlyphMetricsProvider",
    "GlyphPlacement",
    "JustificationSpec",
    "JustifiedParagraph",
    "JustifyMode",
    "JustifySpan",
    "LayoutResult",
    "LineLayout",
    "LineLayoutEngine",
    "MonospaceSpan",
    "ParagraphLayout",
    "ReplacementSpan",
    "TabularSpan",
    "TextRenderer",
    "WidthPolicy",
    "break_lines",
    "load_paragraph_config",
]
