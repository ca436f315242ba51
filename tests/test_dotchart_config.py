from __future__ import annotations

import math
from pathlib import Path
import tempfile
import unittest

from dotchart import chart
from dotchart.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    AxisRange,
    ChartConfig,
    RangePolicy,
    load_chart_config,
)
from dotchart.errors import ChartConfigError


class ChartConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def _write(self, text: str) -> Path:
        path = self.root / "chart.toml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_defaults(self) -> None:
        config = ChartConfig()
        self.assertEqual((config.width, config.height), (DEFAULT_WIDTH, DEFAULT_HEIGHT))
        self.assertIs(config.x_range.policy, RangePolicy.AUTO)
        self.assertTrue(math.isinf(config.x_range.min))
        self.assertTrue(config.show_axis)

    def test_undersized_config_rejected(self) -> None:
        with self.assertRaises(ChartConfigError):
            ChartConfig(width=31)
        with self.assertRaises(ChartConfigError):
            ChartConfig(height=10)

    def test_axis_range_from_pair(self) -> None:
        self.assertEqual(AxisRange.from_pair(None), AxisRange.auto())
        fixed = AxisRange.from_pair((-2, 3))
        self.assertIs(fixed.policy, RangePolicy.FIXED)
        self.assertEqual((fixed.min, fixed.max), (-2.0, 3.0))

    def test_load_toml_config(self) -> None:
        path = self._write(
            'width = 80\n'
            'height = 40\n'
            'show_axis = false\n'
            '[x]\n'
            'min = -1.5\n'
            'max = 1.5\n'
            '[y]\n'
            'min = 0\n'
        )
        config = load_chart_config(path)
        self.assertEqual((config.width, config.height), (80, 40))
        self.assertFalse(config.show_axis)
        self.assertEqual(config.x_range, AxisRange.fixed(-1.5, 1.5))
        self.assertIs(config.y_range.policy, RangePolicy.AUTO)

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_chart_config(self.root / "missing.toml")

    def test_load_rejects_bad_values(self) -> None:
        bad_sources = (
            'width = "wide"\n',
            'width = 12\n',
            'show_axis = "yes"\n',
            'x = 3\n',
            '[y]\nmin = "a"\nmax = 2\n',
            'width = \n',
        )
        for text in bad_sources:
            with self.subTest(source=text):
                with self.assertRaises(ChartConfigError):
                    load_chart_config(self._write(text))


class ChartFactoryTests(unittest.TestCase):
    def test_default_size(self) -> None:
        c = chart()
        self.assertEqual((c.width, c.height), (DEFAULT_WIDTH, DEFAULT_HEIGHT))

    def test_missing_dimension_follows_aspect_ratio(self) -> None:
        self.assertEqual(chart(width=100).height, 50)
        self.assertEqual(chart(height=40).width, 80)

    def test_derived_dimension_still_validated(self) -> None:
        with self.assertRaises(ChartConfigError):
            chart(width=40)

    def test_config_supplies_defaults_and_arguments_override(self) -> None:
        config = ChartConfig(width=64, height=40, x_range=AxisRange.fixed(0.0, 1.0), show_axis=False)
        c = chart(config=config)
        self.assertEqual((c.width, c.height), (64, 40))
        self.assertEqual((c.xmin, c.xmax), (0.0, 1.0))
        self.assertFalse(c.axis_visible)
        c2 = chart(config=config, x_range=(-3.0, 3.0))
        self.assertEqual((c2.xmin, c2.xmax), (-3.0, 3.0))

    def test_rejects_nonpositive_aspect_ratio(self) -> None:
        with self.assertRaises(ValueError):
            chart(width=64, aspect_ratio=0.0)


if __name__ == "__main__":
    unittest.main()
