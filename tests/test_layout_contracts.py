from __future__ import annotations

import unittest

from fixedspans.layout import (
    FontMetrics,
    GlyphPlacement,
    JustificationSpec,
    LayoutResult,
    WidthPolicy,
    classify_character,
)


class _TableMetrics:
    def __init__(self, widths: dict[str, float]) -> None:
        self.widths = widths

    def natural_width(self, text: str) -> float:
        return sum(self.widths.get(ch, 10.0) for ch in text)

    def font_metrics(self) -> FontMetrics:
        return FontMetrics(ascent=8.0, descent=2.0)


class LayoutContractTests(unittest.TestCase):
    def test_character_classification(self) -> None:
        self.assertEqual(classify_character("7", "0123456789", ",."), "numeral")
        self.assertEqual(classify_character(",", "0123456789", ",."), "delimiter")
        self.assertEqual(classify_character("\t", "0123456789", ",."), "whitespace")
        self.assertEqual(classify_character("x", "0123456789", ",."), "other")

    def test_delimiter_membership_wins_over_numeral(self) -> None:
        self.assertEqual(classify_character("1", "0123456789", "1"), "delimiter")

    def test_width_policy_defaults(self) -> None:
        policy = WidthPolicy()
        self.assertEqual(policy.numerals, "0123456789")
        self.assertEqual(policy.delimiters, ",.")

    def test_class_widths_take_widest_member(self) -> None:
        policy = WidthPolicy(numerals="01", delimiters=",.")
        widths = policy.class_widths(_TableMetrics({"0": 9.0, "1": 5.0, ",": 3.0, ".": 2.0}))
        self.assertEqual((widths.numeral, widths.delimiter), (9.0, 3.0))
        self.assertEqual(policy.width_for("1", widths, 5.0), 9.0)
        self.assertEqual(policy.width_for(" ", widths, 4.0), 4.0)

    def test_empty_class_set_has_zero_width(self) -> None:
        widths = WidthPolicy(numerals="", delimiters="").class_widths(_TableMetrics({}))
        self.assertEqual((widths.numeral, widths.delimiter), (0.0, 0.0))

    def test_justification_spec_defaults(self) -> None:
        spec = JustificationSpec(target_width=200.0)
        self.assertEqual(spec.mode, "whitespace_only")
        self.assertEqual(spec.whitespace_weight, 2.0)
        self.assertFalse(spec.justify_last_line)

    def test_justification_spec_validation(self) -> None:
        with self.assertRaises(ValueError):
            JustificationSpec(target_width=-1.0)
        with self.assertRaises(ValueError):
            JustificationSpec(target_width=10.0, whitespace_weight=-0.5)
        with self.assertRaises(ValueError):
            JustificationSpec(target_width=10.0, mode="centered")  # type: ignore[arg-type]

    def test_font_metrics_line_height(self) -> None:
        self.assertEqual(FontMetrics(ascent=12.0, descent=4.0, leading=2.0).line_height, 18.0)
        with self.assertRaises(ValueError):
            FontMetrics(ascent=-1.0, descent=0.0)

    def test_layout_result_helpers(self) -> None:
        result = LayoutResult(placements=(GlyphPlacement("a", 1.0), GlyphPlacement("b", 4.5)), width=9.0)
        self.assertEqual(result.text, "ab")
        self.assertEqual(result.positions(), [1.0, 4.5])
        self.assertEqual(LayoutResult().width, 0.0)


if __name__ == "__main__":
    unittest.main()
