from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Tuple

import numpy as np

Cell = Tuple[int, int]


class Direction(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def displacement(self) -> Cell:
        return _DISPLACEMENTS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def neighbor(self, x: int, y: int) -> Cell:
        dx, dy = self.displacement
        return x + dx, y + dy


# y grows downwards, so TOP is a step towards y = -1
_DISPLACEMENTS = {
    Direction.TOP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.BOTTOM: (0, 1),
    Direction.LEFT: (-1, 0),
}

_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}


@dataclass
class DirectionalValues:
    """One value per cardinal direction (pressures, recency scores, weights)."""

    top: Any = 0.0
    right: Any = 0.0
    bottom: Any = 0.0
    left: Any = 0.0

    def get(self, direction: Direction) -> Any:
        return getattr(self, direction.value)

    def items(self) -> Iterator[Tuple[Direction, Any]]:
        for direction in Direction:
            yield direction, self.get(direction)


def bearing(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    """Angle in radians, atan2(dx, dy): 0 = straight below, pi/2 = right."""
    return math.atan2(to_x - from_x, to_y - from_y)


def bearings(origin: Cell, points: np.ndarray) -> np.ndarray:
    dx = points[:, 0] - origin[0]
    dy = points[:, 1] - origin[1]
    return np.arctan2(dx, dy)


def distances(origin: Cell, points: np.ndarray) -> np.ndarray:
    return np.hypot(points[:, 0] - origin[0], points[:, 1] - origin[1])
