from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol


CharacterClass = Literal["numeral", "delimiter", "whitespace", "other"]
JustifyMode = Literal["whitespace_only", "all_characters"]
JUSTIFY_MODES: tuple[JustifyMode, ...] = ("whitespace_only", "all_characters")

DEFAULT_NUMERAL_CHARACTERS = "0123456789"
DEFAULT_DELIMITER_CHARACTERS = ",."
DEFAULT_WHITESPACE_WEIGHT = 2.0


@dataclass(frozen=True)
class FontMetrics:
    ascent: float
    descent: float
    leading: float = 0.0

    def __post_init__(self) -> None:
        if self.ascent < 0 or self.descent < 0:
            raise ValueError("FontMetrics ascent/descent must be >= 0")

    @property
    def line_height(self) -> float:
        return self.ascent + self.descent + self.leading


class GlyphMetricsProvider(Protocol):
    """Source of natural glyph widths for one font at one size.

    Results must be stable for the duration of a layout call.
    """

    def natural_width(self, text: str) -> float:
        ...

    def font_metrics(self) -> FontMetrics:
        ...


class TextRenderer(Protocol):
    """Side-effecting draw sink; layout never reads back from it."""

    def draw_text(self, text: str, x: float, y: float) -> None:
        ...


def classify_character(ch: str, numerals: str, delimiters: str) -> CharacterClass:
    if ch in delimiters:
        return "delimiter"
    if ch in numerals:
        return "numeral"
    if ch.isspace():
        return "whitespace"
    return "other"


def max_character_width(metrics: GlyphMetricsProvider, characters: str) -> float:
    widest = 0.0
    for ch in characters:
        widest = max(metrics.natural_width(ch), widest)
    return widest


@dataclass(frozen=True)
class ClassWidths:
    numeral: float
    delimiter: float


@dataclass(frozen=True)
class WidthPolicy:
    """Per-class width normalization for tabular rendering.

    Numerals and delimiters render at the widest natural width of their set;
    everything else (whitespace included) keeps its natural width.
    """

    numerals: str = DEFAULT_NUMERAL_CHARACTERS
    delimiters: str = DEFAULT_DELIMITER_CHARACTERS

    def classify(self, ch: str) -> CharacterClass:
        return classify_character(ch, self.numerals, self.delimiters)

    def class_widths(self, metrics: GlyphMetricsProvider) -> ClassWidths:
        return ClassWidths(
            numeral=max_character_width(metrics, self.numerals),
            delimiter=max_character_width(metrics, self.delimiters),
        )

    def width_for(self, ch: str, widths: ClassWidths, natural: float) -> float:
        kind = self.classify(ch)
        if kind == "delimiter":
            return widths.delimiter
        if kind == "numeral":
            return widths.numeral
        return natural


@dataclass(frozen=True)
class JustificationSpec:
    target_width: float
    whitespace_weight: float = DEFAULT_WHITESPACE_WEIGHT
    mode: JustifyMode = "whitespace_only"
    justify_last_line: bool = False

    def __post_init__(self) -> None:
        if self.target_width < 0:
            raise ValueError("JustificationSpec target_width must be >= 0")
        if self.whitespace_weight < 0:
            raise ValueError("JustificationSpec whitespace_weight must be >= 0")
        if self.mode not in JUSTIFY_MODES:
            raise ValueError(f"unknown justify mode: {self.mode}")


@dataclass(frozen=True)
class GlyphPlacement:
    char: str
    x: float


@dataclass(frozen=True)
class LayoutResult:
    placements: tuple[GlyphPlacement, ...] = field(default_factory=tuple)
    width: float = 0.0

    @property
    def text(self) -> str:
        return "".join(p.char for p in self.placements)

    def positions(self) -> list[float]:
        return [p.x for p in self.placements]

    def emit(self, renderer: TextRenderer, baseline_y: float) -> None:
        for placement in self.placements:
            renderer.draw_text(placement.char, placement.x, baseline_y)
