from __future__ import annotations

import itertools
import unittest

import numpy as np

from chartcanvas.bars import (
    ValueLabelPlacement,
    category_centers,
    compute_bar_grid,
    value_label_placement,
)
from chartcanvas.errors import ChartDataError
from chartcanvas.layout import compute_plot_area
from chartcanvas.options import DEFAULT_BAR_COLORS
from chartcanvas.scales import bar_domain, vertical_scale


def _grid(series: list[list[float]], *, width: int = 400, height: int = 300, padding: float = 60, fraction: float = 0.7, colors=DEFAULT_BAR_COLORS):
    arrays = [np.asarray(values, dtype=np.float64) for values in series]
    plot = compute_plot_area(width, height, padding)
    y_scale = vertical_scale(bar_domain(arrays), plot)
    return plot, compute_bar_grid(arrays, plot=plot, y_scale=y_scale, bar_width_fraction=fraction, colors=colors)


class BarGeometryTests(unittest.TestCase):
    def test_bar_count_is_categories_times_series(self) -> None:
        for series_count in (1, 2, 3):
            series = [[float(i + s) for i in range(5)] for s in range(series_count)]
            _, grid = _grid(series)
            self.assertEqual(len(grid.bars), 5 * series_count)

    def test_bars_within_category_are_contiguous_and_do_not_overlap(self) -> None:
        _, grid = _grid([[4.0, 8.0, 2.0], [3.0, 1.0, 9.0], [5.0, 5.0, 5.0]])
        by_category: dict[int, list] = {}
        for bar in grid.bars:
            by_category.setdefault(bar.category_index, []).append(bar)
        for bars in by_category.values():
            bars.sort(key=lambda b: b.series_index)
            for left, right in zip(bars, bars[1:]):
                self.assertAlmostEqual(left.x + left.width, right.x)
        ordered = sorted(grid.bars, key=lambda b: b.x)
        for left, right in zip(ordered, ordered[1:]):
            self.assertLessEqual(left.x + left.width, right.x + 1e-9)

    def test_group_is_centered_in_category_slot(self) -> None:
        plot, grid = _grid([[1.0, 2.0, 3.0, 4.0], [4.0, 3.0, 2.0, 1.0]], fraction=0.5)
        centers = category_centers(4, plot)
        for c, center in enumerate(centers):
            bars = [b for b in grid.bars if b.category_index == c]
            left = min(b.x for b in bars)
            right = max(b.x + b.width for b in bars)
            self.assertAlmostEqual((left + right) / 2, center)
            self.assertAlmostEqual(right - left, grid.group_width)

    def test_reference_geometry_for_single_series(self) -> None:
        plot, grid = _grid([[10.0, 20.0, 30.0, 5.0]])
        self.assertEqual((plot.x, plot.y, plot.width, plot.height), (60.0, 60.0, 280.0, 180.0))
        self.assertAlmostEqual(grid.category_width, 70.0)
        self.assertAlmostEqual(grid.group_width, 49.0)
        self.assertAlmostEqual(grid.bar_width, 49.0)
        self.assertAlmostEqual(grid.bars[0].x, 70.5)
        centers = category_centers(4, plot)
        self.assertAlmostEqual(centers[0] - plot.center_x, -(centers[-1] - plot.center_x))
        self.assertAlmostEqual(grid.bars[0].center_x - plot.center_x, plot.center_x - grid.bars[-1].center_x)

    def test_bar_height_is_monotonic_in_value(self) -> None:
        values = [0.0, 1.0, 2.5, 7.0, 7.0, 10.0]
        _, grid = _grid([values])
        heights = [bar.height for bar in grid.bars]
        for (v0, h0), (v1, h1) in itertools.combinations(zip(values, heights), 2):
            if v1 >= v0:
                self.assertGreaterEqual(h1, h0)
        self.assertAlmostEqual(grid.bars[-1].height, 180.0 / 1.1)

    def test_all_zero_series_renders_flat_bars(self) -> None:
        plot, grid = _grid([[0.0, 0.0, 0.0]])
        for bar in grid.bars:
            self.assertEqual(bar.height, 0.0)
            self.assertEqual(bar.top, plot.bottom)
            self.assertTrue(np.isfinite(bar.x) and np.isfinite(bar.width))

    def test_negative_values_hang_below_baseline(self) -> None:
        _, grid = _grid([[10.0, -5.0]])
        negative = grid.bars[1]
        self.assertLess(negative.height, 0.0)
        self.assertAlmostEqual(negative.rect_top, grid.baseline)
        self.assertAlmostEqual(negative.rect_height, -negative.height)

    def test_all_negative_values_hang_from_top_baseline(self) -> None:
        values = [-10.0, -5.0, -7.5, -1.0]
        plot, grid = _grid([values])
        self.assertAlmostEqual(grid.baseline, plot.y)
        heights = [bar.height for bar in grid.bars]
        for (v0, h0), (v1, h1) in itertools.combinations(zip(values, heights), 2):
            if v1 >= v0:
                self.assertGreaterEqual(h1, h0)
            else:
                self.assertLess(h1, h0)
        for bar in grid.bars:
            self.assertLess(bar.height, 0.0)
            self.assertGreaterEqual(bar.rect_top, plot.y)
            self.assertLessEqual(bar.rect_top + bar.rect_height, plot.bottom)

    def test_colors_cycle_when_palette_is_short(self) -> None:
        palette = ((1, 2, 3, 255), (4, 5, 6, 255))
        _, grid = _grid([[1.0], [2.0], [3.0]], colors=palette)
        self.assertEqual([bar.color for bar in grid.bars], [palette[0], palette[1], palette[0]])

    def test_rejects_too_many_series(self) -> None:
        with self.assertRaises(ChartDataError):
            _grid([[1.0], [2.0], [3.0], [4.0]])

    def test_rejects_bad_width_fraction(self) -> None:
        with self.assertRaises(ChartDataError):
            _grid([[1.0, 2.0]], fraction=1.5)
        with self.assertRaises(ChartDataError):
            _grid([[1.0, 2.0]], fraction=0.0)


class ValueLabelPolicyTests(unittest.TestCase):
    def test_label_bands(self) -> None:
        self.assertIsNone(value_label_placement(10.0))
        self.assertIsNone(value_label_placement(3.0))
        self.assertIsNone(value_label_placement(-30.0))
        self.assertIs(value_label_placement(15.0), ValueLabelPlacement.INSIDE)
        self.assertIs(value_label_placement(20.0), ValueLabelPlacement.INSIDE)
        self.assertIs(value_label_placement(10.01), ValueLabelPlacement.INSIDE)
        self.assertIs(value_label_placement(25.0), ValueLabelPlacement.ABOVE)
        self.assertIs(value_label_placement(20.5), ValueLabelPlacement.ABOVE)


if __name__ == "__main__":
    unittest.main()
