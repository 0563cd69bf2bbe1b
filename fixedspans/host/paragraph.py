from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re

from fixedspans.layout import (
    GlyphMetricsProvider,
    JustificationSpec,
    LayoutResult,
    LineLayoutEngine,
    TextRenderer,
)

LOGGER = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(r"\S+\s*|\s+")


def break_lines(text: str, metrics: GlyphMetricsProvider, max_width: float) -> list[str]:
    """Greedy word wrap honouring explicit newlines.

    Each line keeps the whitespace that follows its last word; a word wider
    than `max_width` gets a line of its own and overflows.
    """
    lines: list[str] = []
    for segment in text.split("\n"):
        current = ""
        for token in _TOKEN_PATTERN.findall(segment):
            candidate = current + token
            if current and metrics.natural_width(candidate.rstrip()) > max_width:
                lines.append(current)
                current = token
            else:
                current = candidate
        lines.append(current)
    return lines


@dataclass(frozen=True)
class LineLayout:
    text: str
    baseline_y: float
    result: LayoutResult
    justified: bool


@dataclass(frozen=True)
class ParagraphLayout:
    lines: tuple[LineLayout, ...] = field(default_factory=tuple)
    line_height: float = 0.0

    @property
    def height(self) -> float:
        return self.line_height * len(self.lines)

    @property
    def width(self) -> float:
        return max((line.result.width for line in self.lines), default=0.0)


class JustifiedParagraph:
    """Host-side driver that justifies a paragraph line by line.

    Owns the text and the justification configuration, splits the text into
    lines and re-runs layout only after `invalidate()`.
    """

    def __init__(self, text: str, metrics: GlyphMetricsProvider, spec: JustificationSpec) -> None:
        self._text = text
        self._metrics = metrics
        self._spec = spec
        self._engine = LineLayoutEngine(metrics)
        self._layout: ParagraphLayout | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def spec(self) -> JustificationSpec:
        return self._spec

    def invalidate(self, *, text: str | None = None, spec: JustificationSpec | None = None) -> None:
        if text is not None:
            self._text = text
        if spec is not None:
            self._spec = spec
        self._layout = None

    def lines(self) -> list[str]:
        return break_lines(self._text, self._metrics, self._spec.target_width)

    def layout(self) -> ParagraphLayout:
        if self._layout is None:
            self._layout = self._compute_layout()
        return self._layout

    def render(self, renderer: TextRenderer, x: float = 0.0, y: float = 0.0) -> ParagraphLayout:
        layout = self.layout()
        for line in layout.lines:
            for placement in line.result.placements:
                renderer.draw_text(placement.char, placement.x + x, line.baseline_y + y)
        return layout

    def _compute_layout(self) -> ParagraphLayout:
        font = self._metrics.font_metrics()
        lines = self.lines()
        # Only the final line of a multi-line paragraph stays ragged.
        last = len(lines) - 1 if len(lines) > 1 and not self._spec.justify_last_line else None
        LOGGER.debug("laying out %d line(s) at width %s", len(lines), self._spec.target_width)
        out: list[LineLayout] = []
        for i, line in enumerate(lines):
            baseline = font.ascent + i * font.line_height
            justified = i != last and bool(line.strip())
            if justified:
                result = self._engine.justify_spec(line, self._spec)
            else:
                result = self._engine.natural_layout(line)
            out.append(LineLayout(text=line, baseline_y=baseline, result=result, justified=justified))
        return ParagraphLayout(lines=tuple(out), line_height=font.line_height)
