"""Single-robot grid-world simulator with imperfect forward motion."""

from robot_gridsim.config.types import MotionNoiseConfig, WalkConfig
from robot_gridsim.domain import CLOCKWISE_ORDER, Cell, Coordinates, Direction, Grid
from robot_gridsim.errors import (
    ErrorKind,
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    SimulationError,
)
from robot_gridsim.experiments.walk import WalkResult, run_walk
from robot_gridsim.simulation import (
    BuildResult,
    Engine,
    RandomSource,
    RobotSimulator,
    ScriptedRandom,
    SimulationBuilder,
)

__all__ = [
    "BuildResult",
    "CLOCKWISE_ORDER",
    "Cell",
    "Coordinates",
    "Direction",
    "Engine",
    "ErrorKind",
    "Grid",
    "IllegalStateError",
    "InvalidArgumentError",
    "MotionNoiseConfig",
    "OutOfBoundsError",
    "RandomSource",
    "RobotSimulator",
    "ScriptedRandom",
    "SimulationBuilder",
    "SimulationError",
    "WalkConfig",
    "WalkResult",
    "run_walk",
]
