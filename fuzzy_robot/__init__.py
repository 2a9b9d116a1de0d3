"""
Fuzzy Robot Package
Reaktywny robot na siatce sterowany logiką rozmytą (bez planowania ścieżki).
"""

from .config import RobotConfig, load_config
from .field import ObstacleField
from .fuzzifiers import DirectionalFuzzifier, DistanceFuzzifier
from .geometry import Direction, DirectionalValues
from .history import MoveHistory
from .membership import TrapezoidalMembership
from .robot import Robot

__all__ = [
    'RobotConfig',
    'load_config',
    'ObstacleField',
    'DirectionalFuzzifier',
    'DistanceFuzzifier',
    'Direction',
    'DirectionalValues',
    'MoveHistory',
    'TrapezoidalMembership',
    'Robot',
]
