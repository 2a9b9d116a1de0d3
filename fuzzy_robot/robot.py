from __future__ import annotations

import math
from typing import Callable, List, Optional

import numpy as np

from .config import RobotConfig
from .field import ObstacleField
from .fuzzifiers import DirectionalFuzzifier, DistanceFuzzifier
from .geometry import Cell, Direction, DirectionalValues, bearings, distances
from .history import MoveHistory

MoveListener = Callable[[int, int], None]


class Robot:
    """
    Reactive fuzzy controller: one cardinal step per tick, no lookahead.

    Every obstacle pushes against the directions it lies in (scaled by how
    close it is), a standing bias favours `priority_direction`, and recently
    visited neighbours are penalised to break two-cell oscillation. The field
    is borrowed; the robot never mutates it.
    """

    def __init__(
        self,
        field: ObstacleField,
        x: int = 0,
        y: int = 0,
        config: Optional[RobotConfig] = None,
        name: str = "FuzzyRobot",
        verbose: bool = False,
    ):
        self.field = field
        self.x = x
        self.y = y
        self.config = config or RobotConfig()
        self.name = name
        self.verbose = verbose

        self.priority_direction: Direction = self.config.priority_direction
        self.history = MoveHistory(self.config.history_capacity)
        self.distance_fuzzifier = DistanceFuzzifier(self.config.closeness_breakpoints)
        self.directional_fuzzifier = DirectionalFuzzifier()
        self._listeners: List[MoveListener] = []

        if self.verbose:
            print(f"[{self.name}] online at ({self.x}, {self.y}), priority={self.priority_direction.value}")

    @property
    def position(self) -> Cell:
        return self.x, self.y

    def add_move_listener(self, listener: MoveListener) -> None:
        self._listeners.append(listener)

    def remove_move_listener(self, listener: MoveListener) -> None:
        self._listeners.remove(listener)

    def recency_scores(self) -> DirectionalValues:
        scores = DirectionalValues()
        for direction in Direction:
            nx, ny = direction.neighbor(self.x, self.y)
            setattr(scores, direction.value, self.history.recency_score(nx, ny))
        return scores

    def collision_pressures(self) -> DirectionalValues:
        # one snapshot per tick
        points = self.field.obstacle_array()
        proximity = np.asarray(self.distance_fuzzifier.closeness(distances(self.position, points)))
        # touching / adjacent obstacles must dominate everything else
        proximity = np.where(
            proximity > self.config.proximity_saturation_threshold,
            proximity * self.config.proximity_amplification,
            proximity,
        )
        coefficients = self.directional_fuzzifier.coefficients(bearings(self.position, points))
        return DirectionalValues(
            top=float(np.sum(proximity * coefficients.top)),
            right=float(np.sum(proximity * coefficients.right)),
            bottom=float(np.sum(proximity * coefficients.bottom)),
            left=float(np.sum(proximity * coefficients.left)),
        )

    def bias_factor(self, direction: Direction) -> float:
        if direction == self.priority_direction:
            return self.config.toward_bias
        if direction == self.priority_direction.opposite:
            return self.config.behind_bias
        return self.config.side_bias

    def weight(self, direction: Direction, pressure: float, recency: float) -> float:
        if pressure == 0:
            return math.inf
        return self.bias_factor(direction) / pressure / (self.config.recency_offset + recency)

    def direction_weights(
        self,
        pressures: Optional[DirectionalValues] = None,
        recency: Optional[DirectionalValues] = None,
    ) -> DirectionalValues:
        pressures = pressures if pressures is not None else self.collision_pressures()
        recency = recency if recency is not None else self.recency_scores()
        weights = DirectionalValues()
        for direction in Direction:
            setattr(
                weights,
                direction.value,
                self.weight(direction, pressures.get(direction), recency.get(direction)),
            )
        return weights

    @staticmethod
    def select_direction(weights: DirectionalValues) -> Direction:
        """Strict maximum; ties go to the earlier of Top, Right, Bottom, Left."""
        best = Direction.TOP
        best_weight = weights.top
        for direction, value in weights.items():
            if value > best_weight:
                best = direction
                best_weight = value
        return best

    def move(self) -> Direction:
        weights = self.direction_weights()
        direction = self.select_direction(weights)

        self.x, self.y = direction.neighbor(self.x, self.y)
        self.history.push(self.x, self.y)
        for listener in list(self._listeners):
            listener(self.x, self.y)

        if self.verbose:
            print(f"[{self.name}] {direction.value:>6} -> ({self.x}, {self.y}) weight={weights.get(direction):.3f}")
        return direction

    def tick(self) -> None:
        self.move()
