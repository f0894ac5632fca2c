from __future__ import annotations

import math
import unittest

import numpy as np

from axischart.bounds import EMPTY_BOUNDS, Bounds, compute_bounds, raw_extent, round_half_up
from axischart.nice import nice_round_up


class ComputeBoundsTests(unittest.TestCase):
    def test_tight_bounds_hug_rounded_extent(self) -> None:
        bounds = compute_bounds([(0, 2.4), (1, -3.6), (2, 7.5)], 3, True)
        self.assertEqual(bounds, Bounds(min=-4.0, max=8.0))

    def test_rounding_is_half_up(self) -> None:
        self.assertEqual(round_half_up(2.5), 3.0)
        self.assertEqual(round_half_up(-2.5), -2.0)
        self.assertEqual(compute_bounds([(0, -2.5), (1, 2.5)], tight=True), Bounds(min=-2.0, max=3.0))

    def test_non_negative_data_anchors_at_zero(self) -> None:
        data = [(0, 2), (1, 5), (2, 9)]
        bounds = compute_bounds(data, 3, False)
        self.assertEqual(bounds.min, 0)
        self.assertGreaterEqual(bounds.max, 9)
        self.assertEqual(bounds.max, nice_round_up(9, 3))

    def test_non_negative_data_can_keep_raw_minimum(self) -> None:
        bounds = compute_bounds([(0, 2), (1, 5), (2, 9)], 3, False, anchor_zero=False)
        self.assertEqual(bounds, Bounds(min=2.0, max=9.0))

    def test_mixed_sign_data_spans_zero(self) -> None:
        bounds = compute_bounds([(0, -4), (1, 3)], 3, False)
        self.assertLessEqual(bounds.min, -4)
        self.assertGreaterEqual(bounds.max, 3)
        self.assertTrue(bounds.contains(0.0))
        self.assertEqual(bounds, Bounds(min=-4.5, max=9.0))

    def test_mixed_sign_steps_divide_span_for_larger_grid_step(self) -> None:
        bounds = compute_bounds([(0, -4), (1, 3)], 5, False)
        self.assertEqual(bounds, Bounds(min=-5.0, max=7.5))
        self.assertAlmostEqual(bounds.span / 5, 2.5)

    def test_positive_dominant_side_gets_headroom_nudge(self) -> None:
        bounds = compute_bounds([(0, -1), (1, 100)], 3, False)
        self.assertEqual(bounds, Bounds(min=-150.0, max=300.0))

    def test_headroom_nudge_never_drops_the_minimum(self) -> None:
        bounds = compute_bounds([(0, -10), (1, 1)], 2, False)
        self.assertLessEqual(bounds.min, -10)
        self.assertGreaterEqual(bounds.max, 1)

    def test_all_negative_data_tops_out_at_zero(self) -> None:
        bounds = compute_bounds([(0, -10), (1, -2)], 3, False)
        self.assertEqual(bounds, Bounds(min=-15.0, max=0.0))
        self.assertLessEqual(bounds.max, 0.0)
        for grid_step in range(1, 9):
            with self.subTest(grid_step=grid_step):
                stepped = compute_bounds([(0, -37), (1, -4), (2, -120)], grid_step, False)
                self.assertLessEqual(stepped.min, -120)
                self.assertGreaterEqual(stepped.max, -4)
                self.assertLessEqual(stepped.max, 0.0)

    def test_all_equal_values(self) -> None:
        self.assertEqual(compute_bounds([(0, 5), (1, 5)], 3), Bounds(min=0.0, max=5.25))
        self.assertEqual(compute_bounds([(0, 0), (1, 0)], 3), Bounds(min=0.0, max=0.0))
        self.assertEqual(compute_bounds([(0, -5), (1, -5)], 3), Bounds(min=-5.25, max=0.0))

    def test_single_grid_step_still_contains_mixed_data(self) -> None:
        bounds = compute_bounds([(0, -1), (1, 100)], 1, False)
        self.assertLessEqual(bounds.min, -1)
        self.assertGreaterEqual(bounds.max, 100)

    def test_empty_series_returns_empty_bounds(self) -> None:
        bounds = compute_bounds([], 3, False)
        self.assertIs(bounds, EMPTY_BOUNDS)
        self.assertTrue(bounds.is_empty)
        self.assertTrue(math.isinf(bounds.min) and bounds.min > 0)
        self.assertTrue(math.isinf(bounds.max) and bounds.max < 0)
        self.assertEqual(bounds.span, 0.0)
        self.assertTrue(compute_bounds([], 3, True).is_empty)

    def test_non_finite_points_are_skipped(self) -> None:
        self.assertTrue(compute_bounds([(0, float("nan")), (1, None)]).is_empty)
        self.assertEqual(raw_extent([(0, float("nan")), (1, 4.2), (2, -1.6)]), (-2.0, 4.0))

    def test_unsorted_input_matches_sorted_input(self) -> None:
        data = [(0, 7), (1, -3), (2, 12), (3, 0), (4, -8)]
        self.assertEqual(compute_bounds(data, 4), compute_bounds(sorted(data, key=lambda p: p[1]), 4))

    def test_repeated_calls_are_identical(self) -> None:
        data = [(0, -37.2), (1, 81.9), (2, 14.0)]
        first = compute_bounds(data, 4, False)
        second = compute_bounds(data, 4, False)
        self.assertEqual(first, second)

    def test_rejects_invalid_grid_step(self) -> None:
        for grid_step in (0, -1, 2.5, True):
            with self.subTest(grid_step=grid_step):
                with self.assertRaises(ValueError):
                    compute_bounds([(0, 1)], grid_step)

    def test_invariants_hold_across_random_series(self) -> None:
        rng = np.random.default_rng(1234)
        for trial in range(60):
            size = int(rng.integers(1, 12))
            low = float(rng.uniform(-800, 200))
            values = rng.uniform(low, low + float(rng.uniform(5, 900)), size=size)
            data = [(i, float(v)) for i, v in enumerate(values)]
            raw_min, raw_max = raw_extent(data)
            for grid_step in range(1, 9):
                with self.subTest(trial=trial, grid_step=grid_step):
                    bounds = compute_bounds(data, grid_step, False)
                    self.assertLessEqual(bounds.min, bounds.max)
                    self.assertLessEqual(bounds.min, raw_min)
                    self.assertGreaterEqual(bounds.max, raw_max)
                    if raw_min < 0 <= raw_max:
                        self.assertTrue(bounds.contains(0.0))
                    if raw_max <= 0:
                        self.assertLessEqual(bounds.max, 0.0)
                    tight = compute_bounds(data, grid_step, True)
                    self.assertEqual((tight.min, tight.max), (raw_min, raw_max))


if __name__ == "__main__":
    unittest.main()
