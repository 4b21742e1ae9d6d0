"""Configuration layer: constants and typed config dataclasses."""

from robot_gridsim.config.constants import (
    COMMAND_ALPHABET,
    DEFAULT_DOUBLE_MOVE_PROBABILITY,
    DEFAULT_NO_MOVE_PROBABILITY,
    GRID_HEIGHT,
    GRID_WIDTH,
    MOVE_COMMAND,
    SIM_SEED,
    START_DIRECTION,
    START_X,
    START_Y,
    TURN_COMMAND,
    WALK_STEPS,
)
from robot_gridsim.config.types import MotionNoiseConfig, WalkConfig, check_probability

__all__ = [
    "COMMAND_ALPHABET",
    "DEFAULT_DOUBLE_MOVE_PROBABILITY",
    "DEFAULT_NO_MOVE_PROBABILITY",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MOVE_COMMAND",
    "MotionNoiseConfig",
    "SIM_SEED",
    "START_DIRECTION",
    "START_X",
    "START_Y",
    "TURN_COMMAND",
    "WALK_STEPS",
    "WalkConfig",
    "check_probability",
]
