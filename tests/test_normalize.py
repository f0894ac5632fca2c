from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from axischart.adapters import normalize_series
from axischart.errors import ChartDataError
from axischart.series import DataSeries


class NormalizeSeriesTests(unittest.TestCase):
    def test_pairs_keep_opaque_x(self) -> None:
        series = normalize_series([("jan", 3), ("feb", -1.5)])
        self.assertEqual(series.x, ("jan", "feb"))
        self.assertEqual(series.y.tolist(), [3.0, -1.5])
        self.assertEqual(series.y.dtype, np.float64)

    def test_mappings_and_bare_numbers(self) -> None:
        self.assertEqual(normalize_series([{"x": "a", "y": 1}, {"y": 2}]).x, ("a", 1))
        series = normalize_series([4, 5, 6])
        self.assertEqual(series.x, (0, 1, 2))
        self.assertEqual(series.y.tolist(), [4.0, 5.0, 6.0])

    def test_decimal_and_missing_values_are_masked(self) -> None:
        series = normalize_series([(0, Decimal("1.5")), (1, None), (2, float("inf"))])
        self.assertEqual(series.mask.tolist(), [True, False, False])
        self.assertEqual(series.skipped_points, 2)
        self.assertEqual(series.finite_y().tolist(), [1.5])

    def test_numpy_arrays(self) -> None:
        series = normalize_series(np.asarray([[0, 1.0], [1, 2.0]]))
        self.assertEqual(series.x, (0.0, 1.0))
        self.assertEqual(series.y.tolist(), [1.0, 2.0])
        self.assertEqual(len(normalize_series(np.arange(3))), 3)
        with self.assertRaises(ChartDataError):
            normalize_series(np.zeros((2, 3)))

    def test_empty_inputs(self) -> None:
        self.assertTrue(normalize_series([]).is_empty)
        self.assertTrue(normalize_series(None).is_empty)

    def test_series_passthrough(self) -> None:
        series = normalize_series([(0, 1)])
        self.assertIs(normalize_series(series), series)
        self.assertIsInstance(series, DataSeries)

    def test_bad_inputs_raise(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize_series([(0, "ten")])
        with self.assertRaises(ChartDataError):
            normalize_series([(0, 1, 2)])
        with self.assertRaises(ChartDataError):
            normalize_series([{"x": 1}])
        with self.assertRaises(ChartDataError):
            normalize_series("1,2,3")

    def test_pandas_dataframe(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"month": ["jan", "feb"], "sales": [3, -2]})
        series = normalize_series(df)
        self.assertEqual(series.x, ("jan", "feb"))
        self.assertEqual(series.y.tolist(), [3.0, -2.0])
        named = normalize_series(df.assign(extra=1), x="month", y="sales")
        self.assertEqual(named.y.tolist(), [3.0, -2.0])
        with self.assertRaises(ChartDataError):
            normalize_series(df, y="missing")

    def test_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        series = normalize_series(torch.tensor([[0, 2], [1, -3]], dtype=torch.int64))
        self.assertEqual(series.y.tolist(), [2.0, -3.0])


if __name__ == "__main__":
    unittest.main()
