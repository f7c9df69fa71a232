"""Tests for trendline confirmation."""

import os
import sys
import unittest

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zone_detector.analyzers.zones.trend import trend_line_match
from zone_detector.configuration import ZoneSettings


class TestTrendLineMatch(unittest.TestCase):
    def setUp(self):
        self.settings = ZoneSettings()

    def test_declining_series_confirms_support(self):
        prices = np.array([100.0, 99.0, 98.0, 97.0])
        self.assertTrue(trend_line_match(prices, 0, self.settings, direction="support"))

    def test_rising_series_confirms_resistance_only(self):
        prices = np.array([100.0, 101.0, 102.0, 103.0])
        self.assertTrue(trend_line_match(prices, 0, self.settings, direction="resistance"))
        self.assertFalse(trend_line_match(prices, 0, self.settings, direction="support"))

    def test_points_outside_deviation_do_not_count(self):
        prices = np.array([100.0, 95.0, 94.0, 93.0])
        self.assertFalse(trend_line_match(prices, 0, self.settings, direction="support"))

    def test_too_few_trailing_points(self):
        """Case: only two bars after the base can never reach three matches."""
        prices = np.array([100.0, 99.0, 98.0])
        self.assertFalse(trend_line_match(prices, 0, self.settings))
        self.assertFalse(trend_line_match(prices, 2, self.settings))

    def test_window_includes_base_bar(self):
        prices = np.array([100.0, 99.0, 98.0, 97.0, 96.0])
        self.assertFalse(trend_line_match(prices, 0, self.settings, range_=3))
        self.assertTrue(trend_line_match(prices, 0, self.settings, range_=4))

    def test_sparse_matches_inside_window(self):
        prices = np.array([100.0, 99.0, 112.0, 97.0, 112.0, 96.0, 112.0])
        self.assertTrue(trend_line_match(prices, 0, self.settings))

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            trend_line_match(np.array([100.0, 99.0]), 0, self.settings, direction="sideways")


if __name__ == "__main__":
    unittest.main()
