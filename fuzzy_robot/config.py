from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .geometry import Direction


class RobotConfig(BaseModel):
    """Tunable parameters of the field, the robot and the host loop."""

    grid_width: int = Field(10, gt=0)
    grid_height: int = Field(10, gt=0)
    num_obstacles: int = Field(20, ge=0)
    start_x: int = 0
    start_y: int = 0

    priority_direction: Direction = Direction.BOTTOM
    history_capacity: int = Field(15, gt=0)

    closeness_breakpoints: Tuple[float, float, float, float] = (0.0, 0.0, 1.0, 5.0)
    proximity_saturation_threshold: float = 0.999
    proximity_amplification: float = Field(10000.0, gt=0)

    recency_offset: float = Field(0.1, gt=0)
    toward_bias: float = Field(2.0, gt=0)
    side_bias: float = Field(1.5, gt=0)
    behind_bias: float = Field(1.0, gt=0)

    tick_interval: float = Field(0.5, ge=0)
    seed: Optional[int] = None

    @field_validator("closeness_breakpoints")
    @classmethod
    def _ordered_breakpoints(cls, value: Tuple[float, float, float, float]):
        a, b, c, d = value
        if not (a <= b <= c <= d):
            raise ValueError("closeness_breakpoints must satisfy a <= b <= c <= d")
        return value


def load_config(config_path: Optional[str] = None, **overrides: Any) -> RobotConfig:
    """Wczytuje konfigurację z pliku JSON (klucz "description" jest pomijany)."""
    data: Dict[str, Any] = {}
    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = json.load(f)
        data = {k: v for k, v in data.items() if k != "description"}

    data.update({k: v for k, v in overrides.items() if v is not None})
    return RobotConfig.model_validate(data)
