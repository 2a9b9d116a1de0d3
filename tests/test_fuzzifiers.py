"""Tests for distance and directional fuzzification."""
import math
import os
import sys

import numpy as np
import pytest

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from fuzzy_robot.fuzzifiers import DirectionalFuzzifier, DistanceFuzzifier  # noqa: E402
from fuzzy_robot.geometry import bearing  # noqa: E402


def test_closeness_touching_and_far():
    fuzzifier = DistanceFuzzifier()
    assert fuzzifier.closeness(0.0) == pytest.approx(1.0)
    assert fuzzifier.closeness(1.0) == 1.0
    assert fuzzifier.closeness(3.0) == pytest.approx(0.5)
    assert fuzzifier.closeness(5.0) == 0.0
    assert fuzzifier.closeness(12.0) == 0.0


def test_closeness_non_increasing():
    fuzzifier = DistanceFuzzifier()
    degrees = fuzzifier.closeness(np.linspace(0.0, 5.0, 51))
    assert np.all(np.diff(degrees) <= 0)


def test_bearing_zero_points_down():
    """atan2(dx, dy): an obstacle straight below has bearing 0."""
    assert bearing(2, 2, 2, 5) == 0.0
    assert bearing(2, 2, 5, 2) == pytest.approx(math.pi / 2)
    assert bearing(2, 2, -1, 2) == pytest.approx(-math.pi / 2)
    assert abs(bearing(2, 2, 2, -1)) == pytest.approx(math.pi)


def test_coefficients_peak_at_cardinal_bearings():
    fuzzifier = DirectionalFuzzifier()
    assert fuzzifier.coefficient_bottom(0.0) == 1.0
    assert fuzzifier.coefficient_right(1.57) == 1.0
    assert fuzzifier.coefficient_left(-1.57) == 1.0
    assert fuzzifier.coefficient_top(3.14) == 1.0


def test_top_coefficient_wraps_negative_angles():
    fuzzifier = DirectionalFuzzifier()
    assert fuzzifier.coefficient_top(-3.14) == 1.0
    assert fuzzifier.coefficient_top(-2.8) == pytest.approx(fuzzifier.coefficient_top(-2.8 + 6.28))
    assert fuzzifier.coefficient_top(-1.0) == 0.0
    assert fuzzifier.coefficient_top(0.0) == 0.0


def test_obstacle_below_only_pushes_bottom():
    fuzzifier = DirectionalFuzzifier()
    values = fuzzifier.coefficients(0.0)
    assert values.bottom == 1.0
    assert values.top == 0.0
    assert values.right == 0.0
    assert values.left == 0.0


def test_diagonal_obstacle_splits_between_neighbours():
    fuzzifier = DirectionalFuzzifier()
    values = fuzzifier.coefficients(math.pi / 4)
    assert values.bottom == pytest.approx(0.5, abs=1e-3)
    assert values.right == pytest.approx(0.5, abs=1e-3)
    assert values.top == 0.0
    assert values.left == 0.0


def test_coefficients_bounded_over_full_circle():
    fuzzifier = DirectionalFuzzifier()
    angles = np.linspace(-math.pi, math.pi, 721)
    values = fuzzifier.coefficients(angles)
    stacked = np.vstack([values.top, values.right, values.bottom, values.left])

    assert stacked.shape == (4, 721)
    assert np.all(stacked >= 0.0)
    assert np.all(stacked <= 1.0)
    assert np.all(stacked.sum(axis=0) <= 2.0 + 1e-9)
