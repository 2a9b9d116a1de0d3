"""
Prosty host dla robota: buduje pole, losuje przeszkody i wywołuje tick().

Uruchomienie:
    python -m fuzzy_robot.simulate --ticks 40 --seed 7 --show-map
"""

from __future__ import annotations

import argparse
import os
import time
from typing import List, Optional, Sequence, Tuple

import numpy as np
from pydantic import ValidationError

from .config import RobotConfig, load_config
from .field import ObstacleField
from .geometry import Cell
from .robot import Robot


def build_world(config: RobotConfig, verbose: bool = False) -> Tuple[ObstacleField, Robot]:
    field = ObstacleField(config.grid_width, config.grid_height)
    rng = np.random.default_rng(config.seed)
    field.randomly_fill(config.num_obstacles, rng=rng, excluded=[(config.start_x, config.start_y)])
    robot = Robot(field, config.start_x, config.start_y, config=config, verbose=verbose)
    return field, robot


def run(
    robot: Robot,
    ticks: int,
    interval: float = 0.0,
    trajectory: Optional[List[Cell]] = None,
) -> List[Cell]:
    """Calls robot.tick() `ticks` times; returns the visited positions."""
    trajectory = trajectory if trajectory is not None else []
    record = trajectory.append

    def on_move(x: int, y: int) -> None:
        record((x, y))

    robot.add_move_listener(on_move)
    try:
        for _ in range(ticks):
            robot.tick()
            if interval > 0:
                time.sleep(interval)
    finally:
        robot.remove_move_listener(on_move)
    return trajectory


def format_field(field: ObstacleField, robot: Optional[Robot] = None) -> str:
    rows = []
    for y in range(field.height):
        row = []
        for x in range(field.width):
            if robot is not None and robot.position == (x, y):
                row.append("R")
            elif field.is_obstacle(x, y):
                row.append("#")
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fuzzy grid robot simulation")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--width", type=int, default=None, help="Grid width")
    parser.add_argument("--height", type=int, default=None, help="Grid height")
    parser.add_argument("--obstacles", type=int, default=None, help="Number of random obstacles")
    parser.add_argument("--ticks", type=int, default=30, help="Number of moves")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for obstacle placement")
    parser.add_argument("--interval", type=float, default=None, help="Seconds between ticks")
    parser.add_argument("--show-map", action="store_true", help="Print the field before and after")
    parser.add_argument("--verbose", action="store_true", help="Print every move")
    args = parser.parse_args(argv)

    if args.config and not os.path.exists(args.config):
        print(f"Config file not found: {args.config}")
        return 2

    try:
        config = load_config(
            args.config,
            grid_width=args.width,
            grid_height=args.height,
            num_obstacles=args.obstacles,
            seed=args.seed,
            tick_interval=args.interval,
        )
        field, robot = build_world(config, verbose=args.verbose)
    except (ValidationError, ValueError) as exc:
        print(f"Invalid configuration: {exc}")
        return 2

    print("=" * 70)
    print("FUZZY GRID ROBOT")
    print("=" * 70)
    print(f"Field:     {field.width}x{field.height}, {config.num_obstacles} obstacles")
    print(f"Start:     ({robot.x}, {robot.y})")
    print(f"Priority:  {robot.priority_direction.value}")
    print(f"Ticks:     {args.ticks} every {config.tick_interval}s")
    print("=" * 70)

    if args.show_map:
        print(format_field(field, robot))
        print()

    trajectory: List[Cell] = []
    try:
        run(robot, args.ticks, config.tick_interval, trajectory)
    except KeyboardInterrupt:
        print("\nPrzerwano przez użytkownika")

    if not args.verbose:
        print(" ".join(f"({x},{y})" for x, y in trajectory))

    collisions = sum(1 for x, y in trajectory if field.in_bounds(x, y) and field.is_obstacle(x, y))
    outside = sum(1 for x, y in trajectory if not field.in_bounds(x, y))
    print(f"Final position: {robot.position}")
    print(f"Distinct cells: {len(set(trajectory))}, obstacle hits: {collisions}, outside grid: {outside}")

    if args.show_map:
        print()
        print(format_field(field, robot))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
