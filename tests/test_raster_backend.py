from __future__ import annotations

import unittest
from unittest import mock

import numpy as np
from PIL import ImageFont

from fixedspans.layout import LineLayoutEngine
from fixedspans.raster import PillowGlyphMetrics, RasterTextRenderer, load_font, new_canvas
from fixedspans.spans import TabularSpan


class RasterBackendTests(unittest.TestCase):
    def setUp(self) -> None:
        load_font.cache_clear()
        patcher = mock.patch("fixedspans.raster.fonts.resolve_font_path", return_value=None)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(load_font.cache_clear)

    def test_missing_font_falls_back_to_default_with_warning(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING"):
            metrics = PillowGlyphMetrics("No Such Family", 18.0)
        self.assertIsInstance(metrics.font, (ImageFont.FreeTypeFont, ImageFont.ImageFont))

    def test_unreadable_font_path_falls_back(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING") as logs:
            PillowGlyphMetrics(font_path="/nonexistent/font.ttf")
        self.assertIn("/nonexistent/font.ttf", logs.output[0])

    def test_natural_widths_are_positive_and_additive_for_empty(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING"):
            metrics = PillowGlyphMetrics()
        self.assertEqual(metrics.natural_width(""), 0.0)
        self.assertGreater(metrics.natural_width("M"), 0.0)
        self.assertGreater(metrics.font_metrics().line_height, 0.0)

    def test_font_size_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            PillowGlyphMetrics(font_size_px=0.0)

    def test_renderer_draws_coverage_onto_canvas(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING"):
            metrics = PillowGlyphMetrics()
        canvas = new_canvas(200, 60, color=(0, 0, 0, 0))
        renderer = RasterTextRenderer(canvas, metrics, color=(255, 255, 255, 255))
        result = TabularSpan().draw(metrics, renderer, "1,234", 0, 5, 10.0, 10.0 + metrics.font_metrics().ascent)

        self.assertEqual(renderer.draw_calls, 5)
        self.assertEqual(len(result.placements), 5)
        self.assertTrue(np.any(canvas[:, :, 3] > 0))
        self.assertEqual(int(canvas[0, 0, 3]), 0)

    def test_whitespace_draws_nothing(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING"):
            metrics = PillowGlyphMetrics()
        canvas = new_canvas(40, 40, color=(0, 0, 0, 0))
        RasterTextRenderer(canvas, metrics).draw_text(" ", 5.0, 20.0)
        self.assertFalse(np.any(canvas))

    def test_engine_measures_with_pillow_metrics(self) -> None:
        with self.assertLogs("fixedspans.raster.fonts", level="WARNING"):
            metrics = PillowGlyphMetrics()
        engine = LineLayoutEngine(metrics)
        digit = max(metrics.natural_width(d) for d in "0123456789")
        self.assertGreaterEqual(engine.measure_tabular("111", "0123456789", ",."), int(3 * digit))

    def test_canvas_dimensions_validated(self) -> None:
        with self.assertRaises(ValueError):
            new_canvas(0, 10)
        self.assertEqual(new_canvas(3, 2).shape, (2, 3, 4))


if __name__ == "__main__":
    unittest.main()
