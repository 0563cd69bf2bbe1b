from __future__ import annotations

from fixedspans.layout import (
    DEFAULT_DELIMITER_CHARACTERS,
    DEFAULT_NUMERAL_CHARACTERS,
    GlyphMetricsProvider,
    LayoutResult,
    LineLayoutEngine,
    TextRenderer,
)

from .base import span_text


class TabularSpan:
    """Formats currency-like text with fixed-width numerals and delimiters.

    All numerals share one width and all delimiters share another (distinct
    from the numeral width); other characters keep their natural width.
    """

    def __init__(
        self,
        delimiters: str = DEFAULT_DELIMITER_CHARACTERS,
        numerals: str = DEFAULT_NUMERAL_CHARACTERS,
    ) -> None:
        self.delimiters = delimiters
        self.numerals = numerals

    def get_size(self, metrics: GlyphMetricsProvider, text: str, start: int, end: int) -> int:
        line = span_text(text, start, end)
        return LineLayoutEngine(metrics).measure_tabular(line, self.numerals, self.delimiters)

    def draw(
        self,
        metrics: GlyphMetricsProvider,
        renderer: TextRenderer,
        text: str,
        start: int,
        end: int,
        x: float,
        y: float,
    ) -> LayoutResult:
        line = span_text(text, start, end)
        return LineLayoutEngine(metrics).draw_tabular(
            line,
            self.numerals,
            self.delimiters,
            x,
            renderer=renderer,
            baseline_y=y,
        )
