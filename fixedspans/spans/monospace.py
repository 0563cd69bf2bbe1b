from __future__ import annotations

from fixedspans.layout import GlyphMetricsProvider, LayoutResult, LineLayoutEngine, TextRenderer

from .base import span_text


REFERENCE_CHARACTERS = "MW"


class MonospaceSpan:
    """Renders every character at one uniform pitch.

    The pitch is the widest of `reference_characters` (default 'M'/'W'), or of
    the spanned text itself when `relative=True`.
    """

    def __init__(self, reference_characters: str | None = REFERENCE_CHARACTERS, *, relative: bool = False) -> None:
        self.reference_characters = None if relative else reference_characters

    def get_size(self, metrics: GlyphMetricsProvider, text: str, start: int, end: int) -> int:
        line = span_text(text, start, end)
        return LineLayoutEngine(metrics).measure_monospace(line, self.reference_characters)

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
        return LineLayoutEngine(metrics).draw_monospace(
            line,
            self.reference_characters,
            x,
            renderer=renderer,
            baseline_y=y,
        )
