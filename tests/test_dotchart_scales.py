from __future__ import annotations

import math
import unittest
import warnings

import numpy as np

from dotchart.scales import Interval, Scale, format_tick, resolve_formatter


class ScaleTests(unittest.TestCase):
    def test_endpoints_and_midpoint_map_onto_target(self) -> None:
        cases = [
            ((-5.0, 10.0), (0.0, 120.0)),
            ((0.0, 1.0), (0.0, 32.0)),
            ((2.0, 6.0), (10.0, 70.0)),
        ]
        for (a, b), (c, d) in cases:
            with self.subTest(source=(a, b), target=(c, d)):
                scale = Scale(Interval(a, b), Interval(c, d))
                self.assertAlmostEqual(scale.linear(a), c, places=9)
                self.assertAlmostEqual(scale.linear(b), d, places=9)
                self.assertAlmostEqual(scale.linear((a + b) / 2.0), (c + d) / 2.0, places=9)

    def test_values_outside_source_extrapolate(self) -> None:
        scale = Scale(Interval(0.0, 10.0), Interval(0.0, 100.0))
        self.assertAlmostEqual(scale.linear(20.0), 200.0)
        self.assertAlmostEqual(scale.linear(-1.0), -10.0)

    def test_degenerate_source_is_non_finite_without_warning(self) -> None:
        scale = Scale(Interval(1.0, 1.0), Interval(0.0, 10.0))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            above = scale.linear(2.0)
            at = scale.linear(1.0)
        self.assertTrue(math.isinf(above))
        self.assertTrue(math.isnan(at))

    def test_array_input_is_vectorized(self) -> None:
        scale = Scale(Interval(0.0, 4.0), Interval(0.0, 8.0))
        out = scale.linear(np.asarray([0.0, 1.0, 4.0], dtype=np.float32))
        self.assertIsInstance(out, np.ndarray)
        self.assertEqual(out.tolist(), [0.0, 2.0, 8.0])

    def test_inverse_round_trips_a_value(self) -> None:
        scale = Scale(Interval(-5.0, 10.0), Interval(0.0, 120.0))
        self.assertAlmostEqual(scale.inverse().linear(scale.linear(3.3)), 3.3, places=9)

    def test_default_tick_format_has_one_decimal(self) -> None:
        self.assertEqual(format_tick(2.0), "2.0")
        self.assertEqual(format_tick(-5.0), "-5.0")
        self.assertEqual(format_tick(3.14159), "3.1")

    def test_resolve_formatter_falls_back_to_default(self) -> None:
        self.assertIs(resolve_formatter(None), format_tick)
        custom = lambda v: f"{v:.0f}%"  # noqa: E731
        self.assertIs(resolve_formatter(custom), custom)


if __name__ == "__main__":
    unittest.main()
