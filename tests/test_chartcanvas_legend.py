from __future__ import annotations

import unittest

from chartcanvas.legend import (
    ROW_SPACING,
    SWATCH_SIZE,
    LegendEntry,
    build_legend_layout,
    legend_visible,
    resolve_legend_labels,
)


def _measure(text: str) -> float:
    return 6.0 * len(text)


class LegendTests(unittest.TestCase):
    def test_visibility_requires_multiple_series_and_flag(self) -> None:
        self.assertFalse(legend_visible(1, True))
        self.assertFalse(legend_visible(2, False))
        self.assertTrue(legend_visible(2, True))
        self.assertTrue(legend_visible(3, True))

    def test_missing_labels_fall_back_to_series_names(self) -> None:
        self.assertEqual(resolve_legend_labels(["North"], 3), ("North", "Series 2", "Series 3"))
        self.assertEqual(resolve_legend_labels(["", "B"], 2), ("Series 1", "B"))
        self.assertEqual(resolve_legend_labels(None, 2), ("Series 1", "Series 2"))
        self.assertEqual(resolve_legend_labels(["a", "b", "c"], 2), ("a", "b"))

    def test_box_is_sized_from_widest_label(self) -> None:
        entries = [LegendEntry((255, 0, 0, 255), "short"), LegendEntry((0, 0, 255, 255), "much longer")]
        layout = build_legend_layout(entries, measure=_measure, surface_width=400, padding=60)
        self.assertAlmostEqual(layout.width, 66.0 + SWATCH_SIZE + 15.0)
        self.assertAlmostEqual(layout.height, 2 * ROW_SPACING + 10.0)
        self.assertAlmostEqual(layout.x, 400 - 60 - layout.width)
        self.assertAlmostEqual(layout.y, 70.0)
        self.assertAlmostEqual(layout.box_x, layout.x - 5.0)
        self.assertAlmostEqual(layout.box_width, layout.width + 10.0)

    def test_rows_stack_top_to_bottom_in_series_order(self) -> None:
        entries = [LegendEntry((i, i, i, 255), f"s{i}") for i in range(3)]
        layout = build_legend_layout(entries, measure=_measure, surface_width=500, padding=40)
        self.assertEqual(len(layout.rows), 3)
        self.assertEqual([row.entry.label for row in layout.rows], ["s0", "s1", "s2"])
        for upper, lower in zip(layout.rows, layout.rows[1:]):
            self.assertAlmostEqual(lower.swatch_y - upper.swatch_y, ROW_SPACING)
        first = layout.rows[0]
        self.assertAlmostEqual(first.swatch_y, layout.y + 5.0)
        self.assertAlmostEqual(first.label_x, first.swatch_x + SWATCH_SIZE + 5.0)
        self.assertAlmostEqual(first.label_y, first.swatch_y + SWATCH_SIZE - 3.0)

    def test_empty_legend_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_legend_layout([], measure=_measure, surface_width=400, padding=60)


if __name__ == "__main__":
    unittest.main()
