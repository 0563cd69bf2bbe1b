from __future__ import annotations

import logging
import math

from .contracts import (
    GlyphMetricsProvider,
    GlyphPlacement,
    JustificationSpec,
    JustifyMode,
    LayoutResult,
    TextRenderer,
    WidthPolicy,
    max_character_width,
)

LOGGER = logging.getLogger(__name__)


def strip_trailing_whitespace(line: str) -> str:
    """Drops a single trailing whitespace character, if present."""
    if line and line[-1].isspace():
        return line[:-1]
    return line


class LineLayoutEngine:
    """Per-character placement for a single line of text.

    The engine holds no state beyond its metrics provider; every call is a pure
    function of its arguments. Draw methods return the computed placements and,
    when a renderer is supplied, emit them to it in order.
    """

    def __init__(self, metrics: GlyphMetricsProvider) -> None:
        self._metrics = metrics

    def natural_layout(
        self,
        line: str,
        start_x: float = 0.0,
        *,
        renderer: TextRenderer | None = None,
        baseline_y: float = 0.0,
    ) -> LayoutResult:
        x = start_x
        placements: list[GlyphPlacement] = []
        for ch in line:
            placements.append(GlyphPlacement(ch, x))
            x += self._metrics.natural_width(ch)
        return self._finish(placements, x - start_x, renderer, baseline_y)

    def measure_tabular(
        self,
        line: str,
        numerals: str,
        delimiters: str,
    ) -> int:
        policy = WidthPolicy(numerals=numerals, delimiters=delimiters)
        widths = policy.class_widths(self._metrics)
        total = 0.0
        for ch in line:
            total += policy.width_for(ch, widths, self._metrics.natural_width(ch))
        return int(math.ceil(total))

    def draw_tabular(
        self,
        line: str,
        numerals: str,
        delimiters: str,
        start_x: float = 0.0,
        *,
        renderer: TextRenderer | None = None,
        baseline_y: float = 0.0,
    ) -> LayoutResult:
        policy = WidthPolicy(numerals=numerals, delimiters=delimiters)
        widths = policy.class_widths(self._metrics)
        x = start_x
        placements: list[GlyphPlacement] = []
        for ch in line:
            natural = self._metrics.natural_width(ch)
            class_width = policy.width_for(ch, widths, natural)
            placements.append(GlyphPlacement(ch, x + (class_width - natural) / 2.0))
            x += class_width
        return self._finish(placements, x - start_x, renderer, baseline_y)

    def monospace_width(self, line: str, reference_set: str | None) -> float:
        return max_character_width(self._metrics, line if reference_set is None else reference_set)

    def measure_monospace(self, line: str, reference_set: str | None) -> int:
        return int(math.ceil(len(line) * self.monospace_width(line, reference_set)))

    def draw_monospace(
        self,
        line: str,
        reference_set: str | None,
        start_x: float = 0.0,
        *,
        renderer: TextRenderer | None = None,
        baseline_y: float = 0.0,
    ) -> LayoutResult:
        mono = self.monospace_width(line, reference_set)
        placements: list[GlyphPlacement] = []
        for i, ch in enumerate(line):
            half_free = (self._metrics.natural_width(ch) - mono) / 2.0
            placements.append(GlyphPlacement(ch, start_x + mono * i - half_free))
        return self._finish(placements, len(line) * mono, renderer, baseline_y)

    def justify(
        self,
        line: str,
        target_width: float,
        whitespace_weight: float,
        mode: JustifyMode,
        start_x: float = 0.0,
        *,
        renderer: TextRenderer | None = None,
        baseline_y: float = 0.0,
    ) -> LayoutResult:
        actual = strip_trailing_whitespace(line)
        widths = [self._metrics.natural_width(ch) for ch in actual]
        slack = target_width - sum(widths)
        if slack <= 0:
            return self.natural_layout(line, start_x, renderer=renderer, baseline_y=baseline_y)

        whitespace_count = sum(1 for ch in actual if ch.isspace())
        if mode == "whitespace_only":
            if whitespace_count == 0:
                LOGGER.debug("no whitespace to expand in %r; using natural layout", line)
                return self.natural_layout(line, start_x, renderer=renderer, baseline_y=baseline_y)
            placements = self._spread_whitespace(actual, widths, slack / whitespace_count, start_x)
        elif mode == "all_characters":
            denominator = whitespace_count * whitespace_weight + (len(actual) - whitespace_count)
            if denominator <= 0:
                LOGGER.debug("no weighted characters to expand in %r; using natural layout", line)
                return self.natural_layout(line, start_x, renderer=renderer, baseline_y=baseline_y)
            placements = self._spread_all(actual, widths, slack / denominator, whitespace_weight, start_x)
        else:
            raise ValueError(f"unknown justify mode: {mode}")
        return self._finish(placements, target_width, renderer, baseline_y)

    def justify_spec(
        self,
        line: str,
        spec: JustificationSpec,
        start_x: float = 0.0,
        *,
        renderer: TextRenderer | None = None,
        baseline_y: float = 0.0,
    ) -> LayoutResult:
        return self.justify(
            line,
            spec.target_width,
            spec.whitespace_weight,
            spec.mode,
            start_x,
            renderer=renderer,
            baseline_y=baseline_y,
        )

    @staticmethod
    def _spread_whitespace(
        line: str,
        widths: list[float],
        per_whitespace: float,
        start_x: float,
    ) -> list[GlyphPlacement]:
        x = start_x
        placements: list[GlyphPlacement] = []
        for ch, width in zip(line, widths):
            placements.append(GlyphPlacement(ch, x))
            x += width
            if ch.isspace():
                x += per_whitespace
        return placements

    @staticmethod
    def _spread_all(
        line: str,
        widths: list[float],
        per_character: float,
        whitespace_weight: float,
        start_x: float,
    ) -> list[GlyphPlacement]:
        half = per_character / 2.0
        x = start_x
        placements: list[GlyphPlacement] = []
        for ch, width in zip(line, widths):
            # Padding sits on both sides so adjacent gaps add up to one unit.
            padding = half * whitespace_weight if ch.isspace() else half
            x += padding
            placements.append(GlyphPlacement(ch, x))
            x += padding + width
        return placements

    @staticmethod
    def _finish(
        placements: list[GlyphPlacement],
        width: float,
        renderer: TextRenderer | None,
        baseline_y: float,
    ) -> LayoutResult:
        result = LayoutResult(placements=tuple(placements), width=width)
        if renderer is not None:
            result.emit(renderer, baseline_y)
        return result
