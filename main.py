from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path

from PIL import Image

from fixedspans.host import JustifiedParagraph, ParagraphLayout, load_paragraph_config
from fixedspans.layout import JUSTIFY_MODES, DEFAULT_WHITESPACE_WEIGHT, JustificationSpec, LayoutResult
from fixedspans.raster import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX, PillowGlyphMetrics, RasterTextRenderer, new_canvas
from fixedspans.spans import JustifySpan, MonospaceSpan, ReplacementSpan, TabularSpan


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fixedspans")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    mono = sub.add_parser("monospace", help="Render one line at a uniform character pitch.")
    mono.add_argument("--reference", default="MW", help="Characters whose widest glyph sets the pitch.")
    mono.add_argument("--relative", action="store_true", help="Use the widest glyph of the text itself.")

    tab = sub.add_parser("tabular", help="Render one line with fixed-width numerals and delimiters.")
    tab.add_argument("--numerals", default="0123456789")
    tab.add_argument("--delimiters", default=",.")

    just = sub.add_parser("justify", help="Justify one line to --width.")
    just.add_argument("--whitespace-weight", type=float, default=-1.0, help="<= 0 selects whitespace-only mode.")

    para = sub.add_parser("paragraph", help="Wrap and justify a paragraph to --width.")
    para.add_argument("--config", type=Path, default=None, help="TOML file with a [justify] table.")
    para.add_argument("--mode", choices=JUSTIFY_MODES, default="whitespace_only")
    para.add_argument("--whitespace-weight", type=float, default=DEFAULT_WHITESPACE_WEIGHT)
    para.add_argument("--justify-last-line", action="store_true")

    for p in (mono, tab, just, para):
        p.add_argument("text")
        p.add_argument("--out", type=Path, default=None, help="Write a PNG of the rendered text.")
        p.add_argument("--width", type=float, default=320.0)
        p.add_argument("--padding", type=int, default=8)
        p.add_argument("--font-family", default=DEFAULT_FONT_FAMILY)
        p.add_argument("--font-size", type=float, default=DEFAULT_FONT_SIZE_PX)
        p.add_argument("--font-path", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    metrics = PillowGlyphMetrics(args.font_family, args.font_size, font_path=args.font_path)

    if args.command == "paragraph":
        if args.config is not None:
            spec = load_paragraph_config(args.config, target_width=args.width)
        else:
            spec = JustificationSpec(
                target_width=args.width,
                whitespace_weight=args.whitespace_weight,
                mode=args.mode,
                justify_last_line=args.justify_last_line,
            )
        paragraph = JustifiedParagraph(args.text, metrics, spec)
        layout = paragraph.layout()
        if args.out is not None:
            canvas = _blank_canvas(max(spec.target_width, layout.width), layout.height, args.padding)
            paragraph.render(RasterTextRenderer(canvas, metrics), x=args.padding, y=args.padding)
            Image.fromarray(canvas).save(args.out)
        print(json.dumps(_paragraph_summary(layout), indent=2))
        return 0

    span: ReplacementSpan
    if args.command == "monospace":
        span = MonospaceSpan(args.reference, relative=args.relative)
    elif args.command == "tabular":
        span = TabularSpan(delimiters=args.delimiters, numerals=args.numerals)
    else:
        span = JustifySpan(args.width, args.whitespace_weight)

    size = span.get_size(metrics, args.text, 0, len(args.text))
    font = metrics.font_metrics()
    canvas = _blank_canvas(size, font.line_height, args.padding)
    renderer = RasterTextRenderer(canvas, metrics)
    result = span.draw(metrics, renderer, args.text, 0, len(args.text), args.padding, args.padding + font.ascent)
    if args.out is not None:
        Image.fromarray(canvas).save(args.out)
    print(json.dumps({"size": size, **_result_summary(result)}, indent=2))
    return 0


def _blank_canvas(width: float, height: float, padding: int):
    return new_canvas(
        max(1, int(math.ceil(width)) + 2 * padding),
        max(1, int(math.ceil(height)) + 2 * padding),
        color=(0, 0, 0, 255),
    )


def _result_summary(result: LayoutResult) -> dict[str, object]:
    return {
        "width": round(result.width, 3),
        "placements": [[p.char, round(p.x, 3)] for p in result.placements],
    }


def _paragraph_summary(layout: ParagraphLayout) -> dict[str, object]:
    return {
        "height": round(layout.height, 3),
        "width": round(layout.width, 3),
        "lines": [
            {"text": line.text, "justified": line.justified, "baseline_y": round(line.baseline_y, 3), **_result_summary(line.result)}
            for line in layout.lines
        ],
    }


if __name__ == "__main__":
    raise SystemExit(main())
