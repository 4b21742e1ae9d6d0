"""Fixed-size rectangular grid of typed cells.

The grid is writable only until :meth:`Grid.freeze` is called; the builder
stamps hazards and blobs and then freezes it before handing it to the engine.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

import numpy as np

from robot_gridsim.errors import IllegalStateError, InvalidArgumentError, OutOfBoundsError


class Cell(IntEnum):
    EMPTY = 0
    HAZARD = 1
    COLOR_BLOB = 2


class Coordinates(NamedTuple):
    """An (x, y) grid coordinate."""

    x: int
    y: int


class Grid:
    """Dense width x height store of :class:`Cell`, indexed as ``(x, y)``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise InvalidArgumentError(f"grid dimensions must be >= 1, got ({width}, {height})")
        self._width = width
        self._height = height
        # Row-major: cells[y, x]
        self._cells = np.full((height, width), Cell.EMPTY, dtype=np.uint8)
        self._frozen = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """``(height, width)``, matching the numpy layout."""
        return (self._height, self._width)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices, so check explicitly.
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"coordinates ({x}, {y}) out of bounds for grid size "
                f"({self._width}, {self._height})"
            )

    def get(self, x: int, y: int) -> Cell:
        self._check_bounds(x, y)
        return Cell(int(self._cells[y, x]))

    def set(self, x: int, y: int, cell: Cell) -> None:
        if self._frozen:
            raise IllegalStateError("grid is frozen")
        self._check_bounds(x, y)
        self._cells[y, x] = Cell(cell)

    def freeze(self) -> None:
        """Make the grid read-only. Idempotent."""
        self._frozen = True
        self._cells.flags.writeable = False

    def count(self, cell: Cell) -> int:
        """Number of cells holding ``cell``."""
        return int(np.count_nonzero(self._cells == cell))

    def as_array(self) -> np.ndarray:
        """Read-only view of the cell values, shaped ``(height, width)``."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, frozen={self._frozen})"
