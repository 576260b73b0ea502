from __future__ import annotations

import unittest

import numpy as np

from chartcanvas.layout import PlotArea
from chartcanvas.scales import (
    Domain,
    LinearScale,
    bar_domain,
    data_domain,
    domain_is_finite,
    format_tick,
    generate_ticks,
    horizontal_scale,
    vertical_scale,
)


class ScaleTests(unittest.TestCase):
    def test_linear_scale_is_affine(self) -> None:
        scale = LinearScale(Domain(0.0, 10.0), 100.0, 200.0)
        self.assertAlmostEqual(scale(0.0), 100.0)
        self.assertAlmostEqual(scale(5.0), 150.0)
        self.assertAlmostEqual(scale(10.0), 200.0)
        self.assertAlmostEqual(scale(12.0), 220.0)

    def test_vertical_scale_maps_larger_values_higher_on_screen(self) -> None:
        plot = PlotArea(x=60.0, y=60.0, width=280.0, height=180.0)
        scale = vertical_scale(Domain(0.0, 33.0), plot)
        self.assertAlmostEqual(scale(0.0), plot.bottom)
        self.assertAlmostEqual(scale(33.0), plot.y)
        self.assertGreater(scale(10.0), scale(20.0))

    def test_horizontal_scale_spans_plot_width(self) -> None:
        plot = PlotArea(x=20.0, y=20.0, width=360.0, height=260.0)
        scale = horizontal_scale(Domain(1.0, 4.0), plot)
        self.assertAlmostEqual(scale(1.0), 20.0)
        self.assertAlmostEqual(scale(4.0), 380.0)

    def test_degenerate_domain_uses_unit_span(self) -> None:
        domain = Domain(5.0, 5.0)
        self.assertEqual(domain.span, 1.0)
        scale = LinearScale(domain, 240.0, 60.0)
        self.assertAlmostEqual(scale(5.0), 240.0)
        mapped = scale(np.asarray([5.0, 5.0, 5.0]))
        self.assertTrue(np.all(np.isfinite(mapped)))

    def test_scale_accepts_numpy_arrays(self) -> None:
        scale = LinearScale(Domain(0.0, 4.0), 0.0, 8.0)
        out = scale(np.asarray([0, 1, 2, 4], dtype=np.int64))
        self.assertEqual(out.dtype, np.float64)
        self.assertEqual(out.tolist(), [0.0, 2.0, 4.0, 8.0])

    def test_bar_domain_is_zero_based_with_headroom(self) -> None:
        domain = bar_domain([np.asarray([10.0, 20.0]), np.asarray([30.0, 5.0])])
        self.assertEqual(domain.min, 0.0)
        self.assertAlmostEqual(domain.max, 33.0)

    def test_bar_domain_extends_below_zero_for_negative_values(self) -> None:
        all_negative = bar_domain([np.asarray([-10.0, -5.0])])
        self.assertAlmostEqual(all_negative.min, -11.0)
        self.assertEqual(all_negative.max, 0.0)
        mixed = bar_domain([np.asarray([10.0, -5.0])])
        self.assertAlmostEqual(mixed.min, -5.5)
        self.assertAlmostEqual(mixed.max, 11.0)

    def test_overflowing_domains_are_not_finite(self) -> None:
        self.assertTrue(domain_is_finite(Domain(-5.0, 5.0)))
        self.assertFalse(domain_is_finite(Domain(-1e308, 1e308)))
        self.assertFalse(domain_is_finite(bar_domain([np.asarray([1.7e308])])))

    def test_data_domain_uses_observed_extremes(self) -> None:
        domain = data_domain(np.asarray([3.0, -2.0, 7.5]))
        self.assertEqual((domain.min, domain.max), (-2.0, 7.5))

    def test_ticks_cover_six_positions_inclusive(self) -> None:
        plot = PlotArea(x=60.0, y=60.0, width=280.0, height=180.0)
        domain = Domain(0.0, 50.0)
        ticks = generate_ticks(domain, vertical_scale(domain, plot))
        self.assertEqual(len(ticks), 6)
        self.assertEqual([t.label for t in ticks], ["0.0", "10.0", "20.0", "30.0", "40.0", "50.0"])
        self.assertAlmostEqual(ticks[0].pixel, plot.bottom)
        self.assertAlmostEqual(ticks[-1].pixel, plot.y)

    def test_ticks_on_degenerate_domain_stay_finite(self) -> None:
        plot = PlotArea(x=20.0, y=20.0, width=100.0, height=100.0)
        domain = Domain(4.0, 4.0)
        ticks = generate_ticks(domain, vertical_scale(domain, plot))
        self.assertEqual(len(ticks), 6)
        self.assertTrue(all(t.value == 4.0 for t in ticks))
        self.assertTrue(all(np.isfinite(t.pixel) for t in ticks))

    def test_format_tick_uses_one_decimal(self) -> None:
        self.assertEqual(format_tick(6.6), "6.6")
        self.assertEqual(format_tick(2.25), "2.2")
        self.assertEqual(format_tick(-0.01), "0.0")
        self.assertEqual(format_tick(-1.5), "-1.5")


if __name__ == "__main__":
    unittest.main()
