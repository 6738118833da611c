"""
Unit tests for accessor statistics.
"""

import unittest

import numpy as np

from glb_reader.accessors import (
    AccessorBounds,
    compute_bounds,
    compute_mean,
    uv_coverage,
    uv_distribution,
)


class TestBounds(unittest.TestCase):
    def test_vector_bounds(self):
        bounds = compute_bounds([[0, -1, 2], [4, 1, 2], [2, 0, -6]])

        self.assertEqual(bounds.min, [0, -1, -6])
        self.assertEqual(bounds.max, [4, 1, 2])
        self.assertEqual(bounds.size, [4, 2, 8])
        self.assertEqual(bounds.center, [2, 0, -2])

    def test_scalar_bounds(self):
        bounds = compute_bounds([3, 1, 2])

        self.assertEqual(bounds.min, [1])
        self.assertEqual(bounds.max, [3])

    def test_accepts_arrays(self):
        bounds = compute_bounds(np.array([[0.5, 0.25], [0.75, 1.0]], dtype=np.float32))

        self.assertEqual(bounds, AccessorBounds(min=[0.5, 0.25], max=[0.75, 1.0]))

    def test_empty_input(self):
        with self.assertRaises(ValueError):
            compute_bounds([])

    def test_mean(self):
        self.assertEqual(compute_mean([[0, 0], [1, 0], [1, 1], [0, 1]]), [0.5, 0.5])


class TestTexcoordStatistics(unittest.TestCase):
    def test_full_coverage(self):
        bounds = compute_bounds([[0, 0], [1, 0], [1, 1], [0, 1]])

        self.assertEqual(uv_coverage(bounds), 1.0)

    def test_partial_coverage(self):
        bounds = compute_bounds([[0, 0.5], [0.5, 1]])

        self.assertEqual(uv_coverage(bounds), 0.25)

    def test_distribution(self):
        uvs = [[0, 0], [0.25, 0.1], [0.6, 0.5], [1.0, 0.75], [0.99, 0.3]]

        distribution = uv_distribution(uvs)

        self.assertEqual(
            distribution["u"],
            {"0-0.25": 1, "0.25-0.5": 1, "0.5-0.75": 1, "0.75-1": 2},
        )
        self.assertEqual(
            distribution["v"],
            {"0-0.25": 2, "0.25-0.5": 1, "0.5-0.75": 1, "0.75-1": 1},
        )

    def test_distribution_ignores_values_outside_unit_square(self):
        distribution = uv_distribution([[-0.5, 1.5], [2.0, 0.1]])

        self.assertEqual(sum(distribution["u"].values()), 0)
        self.assertEqual(sum(distribution["v"].values()), 1)

    def test_distribution_needs_two_components(self):
        with self.assertRaises(ValueError):
            uv_distribution([0.1, 0.2])


if __name__ == "__main__":
    unittest.main()
