"""
Fuzzifiers - distance to "closeness" and bearing to per-direction coefficients.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry import DirectionalValues
from .membership import TrapezoidalMembership

CLOSE_BREAKPOINTS = (0.0, 0.0, 1.0, 5.0)

# Quadrant breakpoints are two-decimal approximations of pi/2, pi, 3pi/2, 2pi.
# They are tied to the atan2(dx, dy) bearing convention: rotating one without
# the other shifts every obstacle by a quarter turn.
QUARTER_TURN = 1.57
HALF_TURN = 3.14
THREE_QUARTER_TURN = 4.71
FULL_TURN = 6.28


class DistanceFuzzifier:
    """Degree to which an obstacle at a given distance is "close"."""

    def __init__(self, breakpoints: Sequence[float] = CLOSE_BREAKPOINTS):
        self.close = TrapezoidalMembership.from_sequence(breakpoints)

    def closeness(self, distance):
        return self.close(distance)


class DirectionalFuzzifier:
    """
    Splits the bearing circle into four overlapping quadrants.

    Bearings are atan2(dx, dy) from robot to obstacle, so 0 is straight below,
    pi/2 to the right, +-pi above and -pi/2 to the left. An obstacle between
    two cardinal directions contributes partially to both.
    """

    below = TrapezoidalMembership(-QUARTER_TURN, 0.0, 0.0, QUARTER_TURN)
    right_side = TrapezoidalMembership(0.0, QUARTER_TURN, QUARTER_TURN, HALF_TURN)
    # defined over [pi/2, 3pi/2], negative bearings are shifted by a full turn
    above = TrapezoidalMembership(QUARTER_TURN, HALF_TURN, HALF_TURN, THREE_QUARTER_TURN)
    left_side = TrapezoidalMembership(-HALF_TURN, -QUARTER_TURN, -QUARTER_TURN, 0.0)

    def coefficient_top(self, angle):
        angle = np.asarray(angle, dtype=float)
        return self.above(np.where(angle >= 0, angle, angle + FULL_TURN))

    def coefficient_right(self, angle):
        return self.right_side(angle)

    def coefficient_bottom(self, angle):
        return self.below(angle)

    def coefficient_left(self, angle):
        return self.left_side(angle)

    def coefficients(self, angle) -> DirectionalValues:
        return DirectionalValues(
            top=self.coefficient_top(angle),
            right=self.coefficient_right(angle),
            bottom=self.coefficient_bottom(angle),
            left=self.coefficient_left(angle),
        )
