"""
Trapezoidal membership function shared by every fuzzifier.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np
import skfuzzy as fuzz

Number = Union[float, int]


class TrapezoidalMembership:
    """
    Trapezoid with breakpoints a <= b <= c <= d.

    Rises from 0 at a to 1 at b, stays 1 on [b, c], falls to 0 at d.
    Vertical edges (a == b or c == d) are 1 at the edge itself, and a ramp
    whose far breakpoint is infinite evaluates to its limit (1), so
    (0, 15, inf, inf) is a one-sided ramp and never produces NaN.

    Accepts a scalar (returns float) or an array (returns an array of the
    same shape).
    """

    def __init__(self, a: Number, b: Number, c: Number, d: Number):
        breakpoints = tuple(float(v) for v in (a, b, c, d))
        if any(math.isnan(v) for v in breakpoints):
            raise ValueError(f"Breakpoints must not be NaN: {breakpoints}")
        if not (breakpoints[0] <= breakpoints[1] <= breakpoints[2] <= breakpoints[3]):
            raise ValueError(f"Breakpoints must satisfy a <= b <= c <= d, got {breakpoints}")
        self.breakpoints: Tuple[float, float, float, float] = breakpoints

    @classmethod
    def from_sequence(cls, breakpoints: Sequence[Number]) -> "TrapezoidalMembership":
        if len(breakpoints) != 4:
            raise ValueError(f"Expected 4 breakpoints, got {len(breakpoints)}")
        return cls(*breakpoints)

    def __call__(self, value):
        values = np.asarray(value, dtype=float)
        degrees = fuzz.trapmf(values.ravel(), np.asarray(self.breakpoints))
        # inf / inf on an open shoulder
        degrees = np.where(np.isnan(degrees), 1.0, degrees)
        if values.ndim == 0:
            return float(degrees[0])
        return degrees.reshape(values.shape)

    def __repr__(self) -> str:
        a, b, c, d = self.breakpoints
        return f"TrapezoidalMembership({a}, {b}, {c}, {d})"
