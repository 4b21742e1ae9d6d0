"""Drive an engine through a command string or a hazard-avoiding policy."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from robot_gridsim.config.constants import MOVE_COMMAND
from robot_gridsim.config.types import WalkConfig
from robot_gridsim.domain.grid import Cell
from robot_gridsim.simulation.engine import Engine


@dataclass
class WalkResult:
    """Counters and visit map collected over one walk."""

    engine: Engine
    visits: np.ndarray
    """Times each cell was entered, shaped (height, width).

    The start cell counts once; a double move counts both cells it crosses.
    """
    moves_attempted: int = 0
    moves_blocked: int = 0
    moves_stalled: int = 0
    """Legal moves where imperfect motion kept the robot in place."""
    turns: int = 0
    blob_sightings: int = 0

    @property
    def cells_visited(self) -> int:
        return int(np.count_nonzero(self.visits))

    @property
    def coverage(self) -> float:
        """Visited fraction of the cells the robot could ever occupy."""
        grid = self.engine.grid
        passable = grid.width * grid.height - grid.count(Cell.HAZARD)
        return self.cells_visited / passable

    def summary(self) -> dict[str, object]:
        return {
            "final_x": self.engine.x,
            "final_y": self.engine.y,
            "direction": self.engine.direction.value,
            "moves_attempted": self.moves_attempted,
            "moves_blocked": self.moves_blocked,
            "moves_stalled": self.moves_stalled,
            "turns": self.turns,
            "blob_sightings": self.blob_sightings,
            "cells_visited": self.cells_visited,
            "coverage": round(self.coverage, 4),
        }


def _step(engine: Engine, result: WalkResult, move: bool) -> None:
    if move:
        before = engine.position
        result.moves_attempted += 1
        if not engine.move_forward():
            result.moves_blocked += 1
        elif engine.position == before:
            result.moves_stalled += 1
        else:
            dx, dy = engine.direction.displacement()
            if engine.position != (before[0] + dx, before[1] + dy):
                # Double move: the robot also passed through the cell in between.
                result.visits[before[1] + dy, before[0] + dx] += 1
            result.visits[engine.y, engine.x] += 1
    else:
        engine.turn_clockwise()
        result.turns += 1
    result.blob_sightings += sum(engine.detect_blobs())


def run_walk(engine: Engine, config: WalkConfig) -> WalkResult:
    """Run ``config.commands`` if given, else ``config.steps`` policy steps.

    The policy turns clockwise whenever a hazard (or the map edge) is ahead
    and moves forward otherwise.
    """
    visits = np.zeros((engine.height, engine.width), dtype=np.int64)
    visits[engine.y, engine.x] = 1
    result = WalkResult(engine=engine, visits=visits)

    if config.commands is not None:
        for command in config.commands:
            _step(engine, result, move=command == MOVE_COMMAND)
    else:
        for _ in range(config.steps):
            _step(engine, result, move=not engine.detect_hazard())
    return result
