"""
Obstacle Field - siatka przeszkód z wirtualną ramką ścian.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import numpy as np

from .geometry import Cell


class ObstacleField:
    def __init__(self, width: int, height: int):
        """
        Args:
            width: Number of cells along x
            height: Number of cells along y
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Field size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.zeros((width, height), dtype=bool)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} field")

    def is_obstacle(self, x: int, y: int) -> bool:
        self._check_bounds(x, y)
        return bool(self.cells[x, y])

    def set_obstacle(self, x: int, y: int, value: bool = True) -> None:
        self._check_bounds(x, y)
        self.cells[x, y] = value

    def inner_obstacles(self) -> Iterator[Cell]:
        for x, y in np.argwhere(self.cells):
            yield int(x), int(y)

    def border_cells(self) -> Iterator[Cell]:
        """One ring of walls just outside the grid (corners excluded)."""
        for x in range(self.width):
            yield x, -1
            yield x, self.height
        for y in range(self.height):
            yield -1, y
            yield self.width, y

    def obstacles(self) -> Iterator[Cell]:
        """Stored obstacles first, then the border ring. Restartable."""
        yield from self.inner_obstacles()
        yield from self.border_cells()

    def obstacle_array(self) -> np.ndarray:
        """Snapshot of obstacles() as an (N, 2) float array."""
        return np.array(list(self.obstacles()), dtype=float).reshape(-1, 2)

    def free_cells(self, excluded: Iterable[Cell] = ()) -> np.ndarray:
        mask = ~self.cells
        for x, y in excluded:
            if self.in_bounds(x, y):
                mask[x, y] = False
        return np.argwhere(mask)

    def randomly_fill(
        self,
        count: int,
        rng: Optional[np.random.Generator] = None,
        excluded: Iterable[Cell] = ((0, 0),),
    ) -> int:
        """Scatter `count` obstacles over empty cells, skipping `excluded`."""
        if count < 0:
            raise ValueError(f"Obstacle count must be >= 0, got {count}")
        candidates = self.free_cells(excluded)
        if count > len(candidates):
            raise ValueError(
                f"Cannot place {count} obstacles, only {len(candidates)} free cells"
            )
        rng = rng if rng is not None else np.random.default_rng()
        chosen = rng.choice(len(candidates), size=count, replace=False)
        for x, y in candidates[chosen]:
            self.cells[x, y] = True
        return count

    def copy(self) -> "ObstacleField":
        clone = ObstacleField(self.width, self.height)
        clone.cells = self.cells.copy()
        return clone

    def __repr__(self) -> str:
        return f"ObstacleField({self.width}x{self.height}, obstacles={int(self.cells.sum())})"
