"""Single-robot grid engine with imperfect forward motion.

Invariant: the robot position is always inside the grid and never on a
HAZARD cell. Only :meth:`Engine.move_forward` and :meth:`Engine.turn_clockwise`
change robot state; the grid is frozen for the engine's whole lifetime.
"""

from __future__ import annotations

import logging

from robot_gridsim.config.types import MotionNoiseConfig
from robot_gridsim.domain.direction import CLOCKWISE_ORDER, Direction
from robot_gridsim.domain.grid import Cell, Grid
from robot_gridsim.errors import InvalidArgumentError, OutOfBoundsError
from robot_gridsim.simulation.contract import RobotSimulator
from robot_gridsim.simulation.random_source import RandomSource

logger = logging.getLogger(__name__)


class Engine(RobotSimulator):
    """Robot state machine over a frozen :class:`Grid`.

    Use :class:`robot_gridsim.simulation.builder.SimulationBuilder` to create
    one; the builder performs all cross-field validation.
    """

    def __init__(
        self,
        grid: Grid,
        x: int,
        y: int,
        direction: Direction,
        rng: RandomSource,
        noise: MotionNoiseConfig,
    ) -> None:
        if self._hazard_or_oob_on(grid, x, y):
            raise InvalidArgumentError(f"robot cannot start on ({x}, {y})")
        grid.freeze()
        self._grid = grid
        self._x = x
        self._y = y
        self._direction = direction
        self._rng = rng
        self._no_move_boundary = noise.no_move_boundary
        self._double_move_boundary = noise.double_move_boundary

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def no_move_boundary(self) -> float:
        return self._no_move_boundary

    @property
    def double_move_boundary(self) -> float:
        return self._double_move_boundary

    def detect_hazard(self) -> bool:
        # Off-map counts as a hazard: moving there is equally illegal.
        dx, dy = self._direction.displacement()
        return self._hazard_or_oob(self._x + dx, self._y + dy)

    def detect_blobs(self) -> tuple[bool, bool, bool, bool]:
        found: list[bool] = []
        for direction in CLOCKWISE_ORDER:
            dx, dy = direction.displacement()
            try:
                cell = self._grid.get(self._x + dx, self._y + dy)
            except OutOfBoundsError:
                found.append(False)
                continue
            found.append(cell == Cell.COLOR_BLOB)
        return (found[0], found[1], found[2], found[3])

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def move_forward(self) -> bool:
        dx, dy = self._direction.displacement()
        target_x, target_y = self._x + dx, self._y + dy
        if self._hazard_or_oob(target_x, target_y):
            logger.debug(
                "Blocked move from (%d, %d) facing %s", self._x, self._y, self._direction.value
            )
            return False

        # Drawn only after the target is known to be legal.
        r = self._rng.random()
        if r <= self._no_move_boundary:
            return True

        if r > self._double_move_boundary:
            over_x, over_y = target_x + dx, target_y + dy
            if not self._hazard_or_oob(over_x, over_y):
                target_x, target_y = over_x, over_y

        self._x, self._y = target_x, target_y
        return True

    def turn_clockwise(self) -> None:
        self._direction = self._direction.clockwise()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _hazard_or_oob(self, x: int, y: int) -> bool:
        return self._hazard_or_oob_on(self._grid, x, y)

    @staticmethod
    def _hazard_or_oob_on(grid: Grid, x: int, y: int) -> bool:
        try:
            return grid.get(x, y) == Cell.HAZARD
        except OutOfBoundsError:
            return True

    def __repr__(self) -> str:
        return (
            f"Engine(x={self._x}, y={self._y}, direction={self._direction.value}, "
            f"grid={self._grid.width}x{self._grid.height})"
        )
