"""Simulation layer: engine, builder and random sources."""

from robot_gridsim.simulation.builder import BuildResult, SimulationBuilder
from robot_gridsim.simulation.contract import RobotSimulator
from robot_gridsim.simulation.engine import Engine
from robot_gridsim.simulation.random_source import RandomSource, ScriptedRandom

__all__ = [
    "BuildResult",
    "Engine",
    "RandomSource",
    "RobotSimulator",
    "ScriptedRandom",
    "SimulationBuilder",
]
