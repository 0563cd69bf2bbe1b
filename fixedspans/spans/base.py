from __future__ import annotations

from typing import Protocol

from fixedspans.layout import GlyphMetricsProvider, LayoutResult, TextRenderer


class ReplacementSpan(Protocol):
    """Measure+draw capability a host text pipeline calls for a text range.

    `text[start:end]` is the range the span is attached to; `x` is the pen
    position and `y` the baseline the host assigned to it.
    """

    def get_size(self, metrics: GlyphMetricsProvider, text: str, start: int, end: int) -> int:
        ...

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
        ...


def span_text(text: str, start: int, end: int) -> str:
    if start < 0 or end > len(text) or start > end:
        raise ValueError(f"span range [{start}, {end}) out of bounds for text of length {len(text)}")
    return text[start:end]
