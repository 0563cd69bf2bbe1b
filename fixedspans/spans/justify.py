from __future__ import annotations

from fixedspans.layout import (
    GlyphMetricsProvider,
    JUSTIFY_MODES,
    JustificationSpec,
    JustifyMode,
    LayoutResult,
    LineLayoutEngine,
    TextRenderer,
)

from .base import span_text


class JustifySpan:
    """Justifies one line of text to `line_width`.

    Without an explicit `mode`, a non-positive `whitespace_weight` selects
    whitespace-only expansion and a positive one spreads the slack across every
    character with whitespace weighted by it.
    """

    def __init__(
        self,
        line_width: float,
        whitespace_weight: float = -1.0,
        *,
        mode: JustifyMode | None = None,
    ) -> None:
        if line_width < 0:
            raise ValueError("JustifySpan line_width must be >= 0")
        if mode is None:
            mode = "all_characters" if whitespace_weight > 0 else "whitespace_only"
        elif mode not in JUSTIFY_MODES:
            raise ValueError(f"unknown justify mode: {mode}")
        self.line_width = line_width
        self.whitespace_weight = whitespace_weight
        self.mode: JustifyMode = mode

    @classmethod
    def from_spec(cls, spec: JustificationSpec) -> "JustifySpan":
        return cls(spec.target_width, spec.whitespace_weight, mode=spec.mode)

    @property
    def spec(self) -> JustificationSpec:
        return JustificationSpec(
            target_width=self.line_width,
            whitespace_weight=max(0.0, self.whitespace_weight),
            mode=self.mode,
        )

    def get_size(self, metrics: GlyphMetricsProvider, text: str, start: int, end: int) -> int:
        # A justified line always claims the full width.
        span_text(text, start, end)
        return int(self.line_width)

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
        return LineLayoutEngine(metrics).justify_spec(line, self.spec, x, renderer=renderer, baseline_y=y)
