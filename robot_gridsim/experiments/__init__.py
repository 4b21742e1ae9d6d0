"""Experiments layer: walk runner and CLI."""

from robot_gridsim.experiments.walk import WalkResult, run_walk

__all__ = [
    "WalkResult",
    "run_walk",
]
