"""Validated, step-by-step construction of an :class:`Engine`.

Setters validate their own argument immediately. Cross-field checks
(start inside the map, probability sum, hazard/blob overlaps) run in
:meth:`SimulationBuilder.build` in a fixed order, and each failure is a
distinct error. A builder produces at most one engine.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable
from dataclasses import dataclass
from random import Random

from robot_gridsim.config.constants import (
    DEFAULT_DOUBLE_MOVE_PROBABILITY,
    DEFAULT_NO_MOVE_PROBABILITY,
)
from robot_gridsim.config.types import MotionNoiseConfig, check_probability
from robot_gridsim.domain.direction import Direction
from robot_gridsim.domain.grid import Cell, Coordinates, Grid
from robot_gridsim.errors import (
    IllegalStateError,
    InvalidArgumentError,
    OutOfBoundsError,
    SimulationError,
)
from robot_gridsim.simulation.engine import Engine
from robot_gridsim.simulation.random_source import RandomSource

logger = logging.getLogger(__name__)

CoordinateSource = Iterable[tuple[int, int]]
"""Any finite iterable of (x, y) integer pairs; consumed once during build."""


def _check_int(value: object, name: str) -> int:
    """Accept any integral value (including numpy integers) except bool."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _check_source(coords: object, name: str) -> CoordinateSource | None:
    if coords is not None and not isinstance(coords, Iterable):
        raise InvalidArgumentError(f"{name} must be an iterable of (x, y) pairs, got {coords!r}")
    return coords


def _as_coordinates(raw: object) -> Coordinates:
    try:
        x, y = raw  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"coordinate must be an (x, y) pair, got {raw!r}") from exc
    return Coordinates(_check_int(x, "coordinate x"), _check_int(y, "coordinate y"))


@dataclass(frozen=True)
class BuildResult:
    """Outcome of :meth:`SimulationBuilder.try_build`: exactly one field is set."""

    engine: Engine | None = None
    error: SimulationError | None = None

    @property
    def ok(self) -> bool:
        return self.engine is not None


class SimulationBuilder:
    """Accumulates construction parameters and produces one :class:`Engine`."""

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._map_size_set = False
        self._x = 0
        self._y = 0
        self._position_set = False
        self._direction: Direction | None = None
        self._hazards: CoordinateSource | None = None
        self._blobs: CoordinateSource | None = None
        self._rng: RandomSource | None = None
        self._p_no_move = DEFAULT_NO_MOVE_PROBABILITY
        self._p_double_move = DEFAULT_DOUBLE_MOVE_PROBABILITY
        self._spent = False

    def _ensure_open(self) -> None:
        if self._spent:
            raise IllegalStateError("builder has already been used to build an engine")

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_map_size(self, width: int, height: int) -> SimulationBuilder:
        self._ensure_open()
        width = _check_int(width, "map width")
        height = _check_int(height, "map height")
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"illegal map size: ({width}, {height})")
        self._width = width
        self._height = height
        self._map_size_set = True
        return self

    def set_robot_position(self, x: int, y: int) -> SimulationBuilder:
        """Set the start cell. The upper bound is checked in :meth:`build`."""
        self._ensure_open()
        x = _check_int(x, "initial x")
        y = _check_int(y, "initial y")
        if x < 0:
            raise InvalidArgumentError(f"negative initial x coordinate: {x}")
        if y < 0:
            raise InvalidArgumentError(f"negative initial y coordinate: {y}")
        self._x = x
        self._y = y
        self._position_set = True
        return self

    def set_robot_direction(self, direction: Direction | str) -> SimulationBuilder:
        self._ensure_open()
        self._direction = Direction.parse(direction)
        return self

    def set_hazards(self, coords: CoordinateSource | None) -> SimulationBuilder:
        """Hazard cells; ``None`` means none."""
        self._ensure_open()
        self._hazards = _check_source(coords, "hazards")
        return self

    def set_blobs(self, coords: CoordinateSource | None) -> SimulationBuilder:
        """Color-blob cells; ``None`` means none."""
        self._ensure_open()
        self._blobs = _check_source(coords, "blobs")
        return self

    def set_random_source(self, rng: RandomSource | None) -> SimulationBuilder:
        self._ensure_open()
        if rng is not None and not callable(getattr(rng, "random", None)):
            raise InvalidArgumentError("random source must provide a random() method")
        self._rng = rng
        return self

    def set_no_move_probability(self, prob: float) -> SimulationBuilder:
        self._ensure_open()
        self._p_no_move = check_probability(prob, "no-move probability")
        return self

    def set_double_move_probability(self, prob: float) -> SimulationBuilder:
        self._ensure_open()
        self._p_double_move = check_probability(prob, "double-move probability")
        return self

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def build(self) -> Engine:
        """Validate everything and return the engine.

        Raises:
            IllegalStateError: map size, position or direction was never set,
                or the builder was already used.
            OutOfBoundsError: the start position, a hazard or a blob lies
                outside the map.
            InvalidArgumentError: probabilities sum above 1, a hazard sits on
                the start position, or a blob sits on a hazard.
        """
        self._ensure_open()
        if not self._map_size_set:
            raise IllegalStateError("size of the map has not been set")
        if not self._position_set:
            raise IllegalStateError("position of the robot has not been set")
        if self._direction is None:
            raise IllegalStateError("direction the robot is facing has not been set")
        if self._x >= self._width or self._y >= self._height:
            raise OutOfBoundsError(
                f"coordinates ({self._x}, {self._y}) out of bounds for map size "
                f"({self._width}, {self._height})"
            )
        noise = MotionNoiseConfig(p_no_move=self._p_no_move, p_double_move=self._p_double_move)

        # The coordinate sources are consumed from here on, so no retry.
        self._spent = True
        grid = Grid(self._width, self._height)
        n_hazards = self._stamp_hazards(grid)
        n_blobs = self._stamp_blobs(grid)
        rng = self._rng if self._rng is not None else Random()

        engine = Engine(grid, self._x, self._y, self._direction, rng, noise)
        logger.debug(
            "Built %dx%d engine at (%d, %d) facing %s with %d hazards, %d blobs",
            self._width,
            self._height,
            self._x,
            self._y,
            self._direction.value,
            n_hazards,
            n_blobs,
        )
        self._hazards = None
        self._blobs = None
        return engine

    def try_build(self) -> BuildResult:
        """Like :meth:`build`, but returns the failure instead of raising it."""
        try:
            return BuildResult(engine=self.build())
        except SimulationError as exc:
            return BuildResult(error=exc)

    def _stamp_hazards(self, grid: Grid) -> int:
        if self._hazards is None:
            return 0
        count = 0
        for raw in self._hazards:
            coord = _as_coordinates(raw)
            if coord == (self._x, self._y):
                raise InvalidArgumentError(
                    f"overlapping coordinates ({coord.x}, {coord.y}) for hazard and "
                    "initial robot position"
                )
            grid.set(coord.x, coord.y, Cell.HAZARD)
            count += 1
        return count

    def _stamp_blobs(self, grid: Grid) -> int:
        # A blob on the robot's start cell is allowed.
        if self._blobs is None:
            return 0
        count = 0
        for raw in self._blobs:
            coord = _as_coordinates(raw)
            if grid.get(coord.x, coord.y) == Cell.HAZARD:
                raise InvalidArgumentError(
                    f"overlapping coordinates ({coord.x}, {coord.y}) for hazard and color blob"
                )
            grid.set(coord.x, coord.y, Cell.COLOR_BLOB)
            count += 1
        return count
