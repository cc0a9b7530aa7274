"""
Unit tests for geospatial calculations.
"""

import unittest

import numpy as np

from drone_log_parser.models import NormalizedPoint
from drone_log_parser.utils.coordinates import (
    calculate_max_distance_from_home, calculate_total_distance,
    haversine_distance_feet, is_valid_coordinate
)

# Length of one degree of latitude on a sphere of radius 20,902,231 ft
FEET_PER_DEGREE = 20902231.0 * np.pi / 180


class TestCoordinateValidity(unittest.TestCase):
    """Test GPS fix validation."""

    def test_valid_coordinates(self):
        self.assertTrue(is_valid_coordinate(37.7749, -122.4194))
        self.assertTrue(is_valid_coordinate(-90, 180))
        self.assertTrue(is_valid_coordinate(np.float64(51.5), np.float64(-0.12)))

    def test_null_island_rejected(self):
        self.assertFalse(is_valid_coordinate(0, 0))
        self.assertFalse(is_valid_coordinate(0.0, -0.0))

    def test_single_zero_component_allowed(self):
        self.assertTrue(is_valid_coordinate(0, 10.5))
        self.assertTrue(is_valid_coordinate(51.48, 0))

    def test_out_of_range(self):
        self.assertFalse(is_valid_coordinate(90.1, 0))
        self.assertFalse(is_valid_coordinate(45, -180.5))

    def test_non_numeric(self):
        self.assertFalse(is_valid_coordinate('37.7', '-122.4'))
        self.assertFalse(is_valid_coordinate(None, -122.4))
        self.assertFalse(is_valid_coordinate(True, 1))
        self.assertFalse(is_valid_coordinate(np.nan, 1))
        self.assertFalse(is_valid_coordinate(np.inf, 1))


class TestDistances(unittest.TestCase):
    """Test haversine based distances."""

    def test_same_point_is_zero(self):
        self.assertEqual(haversine_distance_feet(37.0, -122.0, 37.0, -122.0), 0.0)

    def test_one_degree_of_latitude(self):
        distance = haversine_distance_feet(10.0, 20.0, 11.0, 20.0)
        self.assertIsInstance(distance, float)
        self.assertAlmostEqual(distance, FEET_PER_DEGREE, delta=1.0)

    def test_vectorized(self):
        distances = haversine_distance_feet(10.0, 20.0, np.array([11.0, 12.0]), np.array([20.0, 20.0]))
        self.assertEqual(distances.shape, (2,))
        self.assertAlmostEqual(distances[1], 2 * FEET_PER_DEGREE, delta=2.0)

    def test_total_distance(self):
        points = [(10.0, 20.0), (11.0, 20.0), (12.0, 20.0)]
        self.assertAlmostEqual(calculate_total_distance(points), 2 * FEET_PER_DEGREE, delta=2.0)

    def test_total_distance_skips_invalid_pairs(self):
        points = [(10.0, 20.0), (0.0, 0.0), (11.0, 20.0), (12.0, 20.0)]
        self.assertAlmostEqual(calculate_total_distance(points), FEET_PER_DEGREE, delta=1.0)

    def test_total_distance_short_lists(self):
        self.assertEqual(calculate_total_distance([]), 0.0)
        self.assertEqual(calculate_total_distance([(10.0, 20.0)]), 0.0)

    def test_max_distance_from_home(self):
        points = [(10.0, 20.0), (11.0, 20.0), (10.5, 20.0)]
        self.assertAlmostEqual(calculate_max_distance_from_home(points), FEET_PER_DEGREE, delta=1.0)

    def test_home_is_first_valid_point(self):
        points = [(0.0, 0.0), (10.0, 20.0), (10.5, 20.0)]
        self.assertAlmostEqual(calculate_max_distance_from_home(points),
                               FEET_PER_DEGREE / 2, delta=1.0)

    def test_max_distance_needs_two_valid_points(self):
        self.assertEqual(calculate_max_distance_from_home([(10.0, 20.0)]), 0.0)
        self.assertEqual(calculate_max_distance_from_home([(10.0, 20.0), (0.0, 0.0)]), 0.0)

    def test_accepts_normalized_points(self):
        points = [NormalizedPoint(10.0, 20.0), NormalizedPoint(11.0, 20.0)]
        self.assertAlmostEqual(calculate_total_distance(points), FEET_PER_DEGREE, delta=1.0)
        self.assertAlmostEqual(calculate_max_distance_from_home(points), FEET_PER_DEGREE, delta=1.0)


if __name__ == '__main__':
    unittest.main()
