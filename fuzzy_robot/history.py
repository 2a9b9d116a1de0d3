"""
Move History - bufor ostatnich odwiedzonych komórek (anty-oscylacja).
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from .geometry import Cell
from .membership import TrapezoidalMembership

MAX_HISTORY_LENGTH = 15


class MoveHistory:
    def __init__(self, capacity: int = MAX_HISTORY_LENGTH):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.steps: Deque[Cell] = deque(maxlen=capacity)
        self.membership = TrapezoidalMembership(0.0, capacity, float("inf"), float("inf"))

    def push(self, x: int, y: int) -> None:
        # deque(maxlen) drops the oldest entry on overflow
        self.steps.append((x, y))

    def index_of(self, x: int, y: int) -> int:
        """First matching index in insertion order (0 = oldest), -1 if absent."""
        try:
            return self.steps.index((x, y))
        except ValueError:
            return -1

    def recency_score(self, x: int, y: int) -> float:
        """
        membership(first index + 1) over (0, capacity, inf, inf).

        A cell never visited scores 0, the oldest retained entry
        1 / capacity, and the entry at index capacity - 1 scores 1. The robot
        divides by (offset + score), so 0 means no penalty.
        """
        return self.membership(self.index_of(x, y) + 1)

    def clear(self) -> None:
        self.steps.clear()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.steps)

    def __contains__(self, cell: object) -> bool:
        return cell in self.steps
