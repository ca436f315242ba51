from __future__ import annotations

from decimal import Decimal
import math
import unittest

import numpy as np

from dotchart.adapters import normalize_points, sample_function
from dotchart.errors import PlotDataError


class NormalizePointsTests(unittest.TestCase):
    def test_sequence_of_pairs(self) -> None:
        arr = normalize_points([(-5.0, 3.0), (3.3, 2.0), (10, 6)])
        self.assertEqual(arr.shape, (3, 2))
        self.assertEqual(arr.dtype, np.float32)
        self.assertEqual(arr[:, 0].tolist()[0], -5.0)
        self.assertAlmostEqual(float(arr[1, 0]), 3.3, places=5)

    def test_none_and_decimal_and_numeric_strings(self) -> None:
        arr = normalize_points([(Decimal("1.5"), None), ("2", "2.25")])
        self.assertEqual(arr[0, 0], 1.5)
        self.assertTrue(math.isnan(float(arr[0, 1])))
        self.assertEqual(arr[1].tolist(), [2.0, 2.25])

    def test_empty_inputs(self) -> None:
        for empty in (None, [], (), np.empty((0, 2))):
            with self.subTest(value=empty):
                self.assertEqual(normalize_points(empty).shape, (0, 2))

    def test_ndarray_input(self) -> None:
        arr = normalize_points(np.asarray([[0, 1], [2, 3]], dtype=np.int64))
        self.assertEqual(arr.dtype, np.float32)
        self.assertEqual(arr.tolist(), [[0.0, 1.0], [2.0, 3.0]])

    def test_rejects_wrong_shapes_and_values(self) -> None:
        bad_inputs = (
            np.zeros((3, 3)),
            np.zeros(4),
            [(1.0, 2.0, 3.0)],
            [1.0, 2.0],
            [("a", 1.0)],
            "1,2",
            42,
        )
        for bad in bad_inputs:
            with self.subTest(value=bad):
                with self.assertRaises(PlotDataError):
                    normalize_points(bad)

    def test_pandas_two_column_frame(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"t": [0, 1, 2], "v": [1.5, 2.5, 3.5], "tag": ["a", "b", "c"]})
        arr = normalize_points(df)
        self.assertEqual(arr.tolist(), [[0.0, 1.5], [1.0, 2.5], [2.0, 3.5]])

    def test_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        arr = normalize_points(torch.tensor([[1, 2], [3, 4]], dtype=torch.int64))
        self.assertEqual(arr.dtype, np.float32)
        self.assertEqual(arr.tolist(), [[1.0, 2.0], [3.0, 4.0]])


class SampleFunctionTests(unittest.TestCase):
    def test_samples_evenly(self) -> None:
        arr = sample_function(lambda x: 2.0 * x, 0.0, 1.0, count=3)
        np.testing.assert_allclose(arr, [[0.0, 0.0], [0.5, 1.0], [1.0, 2.0]])

    def test_domain_errors_become_nan(self) -> None:
        arr = sample_function(math.sqrt, -1.0, 1.0, count=3)
        self.assertTrue(math.isnan(float(arr[0, 1])))
        self.assertEqual(float(arr[2, 1]), 1.0)

    def test_requires_two_samples(self) -> None:
        with self.assertRaises(ValueError):
            sample_function(math.sin, 0.0, 1.0, count=1)


if __name__ == "__main__":
    unittest.main()
