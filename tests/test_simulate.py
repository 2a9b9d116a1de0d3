"""End-to-end runs through the host loop and the CLI."""
import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from fuzzy_robot.config import RobotConfig  # noqa: E402
from fuzzy_robot.field import ObstacleField  # noqa: E402
from fuzzy_robot.robot import Robot  # noqa: E402
from fuzzy_robot.simulate import build_world, format_field, main, run  # noqa: E402


def test_run_records_every_move():
    robot = Robot(ObstacleField(5, 5), 2, 2)
    trajectory = run(robot, ticks=8)

    assert len(trajectory) == 8
    assert trajectory[0] == (2, 3)
    assert trajectory[-1] == robot.position


def test_run_detaches_its_listener():
    robot = Robot(ObstacleField(5, 5), 2, 2)
    trajectory = run(robot, ticks=3)
    robot.tick()
    assert len(trajectory) == 3


def test_build_world_keeps_start_cell_free():
    config = RobotConfig(grid_width=4, grid_height=4, num_obstacles=15, start_x=1, start_y=2, seed=11)
    field, robot = build_world(config)

    assert int(field.cells.sum()) == 15
    assert not field.is_obstacle(1, 2)
    assert robot.position == (1, 2)
    assert robot.field is field


def test_build_world_is_reproducible():
    config = RobotConfig(num_obstacles=20, seed=5)
    first, _ = build_world(config)
    second, _ = build_world(config)
    assert (first.cells == second.cells).all()


def test_format_field_marks_robot_and_obstacles():
    field = ObstacleField(3, 2)
    field.set_obstacle(2, 0)
    robot = Robot(field, 0, 1)

    assert format_field(field, robot) == "..#\nR.."


def test_cli_runs_and_reports(capsys):
    code = main([
        "--width", "6", "--height", "6", "--obstacles", "5",
        "--ticks", "10", "--seed", "3", "--interval", "0", "--show-map",
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "FUZZY GRID ROBOT" in out
    assert "Final position" in out
    assert "R" in out


def test_cli_rejects_missing_config(capsys):
    assert main(["--config", "/nonexistent/robot.json"]) == 2
    assert "not found" in capsys.readouterr().out


def test_cli_rejects_invalid_sizes(capsys):
    assert main(["--width", "0", "--interval", "0"]) == 2
    assert main(["--width", "3", "--height", "3", "--obstacles", "9", "--interval", "0"]) == 2
    assert "Invalid configuration" in capsys.readouterr().out
