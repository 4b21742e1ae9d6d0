"""Tests for robot_gridsim.domain.grid module."""

from __future__ import annotations

import pytest

from robot_gridsim.domain.grid import Cell, Coordinates, Grid
from robot_gridsim.errors import IllegalStateError, InvalidArgumentError, OutOfBoundsError


class TestGridCreate:
    def test_all_cells_empty(self) -> None:
        grid = Grid(4, 3)
        for y in range(3):
            for x in range(4):
                assert grid.get(x, y) is Cell.EMPTY

    def test_dimensions(self) -> None:
        grid = Grid(4, 3)
        assert grid.width == 4
        assert grid.height == 3
        assert grid.shape == (3, 4)

    @pytest.mark.parametrize(("width", "height"), [(0, 1), (1, 0), (-2, 3)])
    def test_non_positive_dimensions_rejected(self, width: int, height: int) -> None:
        with pytest.raises(InvalidArgumentError):
            Grid(width, height)


class TestGridAccess:
    def test_set_then_get(self) -> None:
        grid = Grid(5, 5)
        grid.set(1, 3, Cell.HAZARD)
        grid.set(4, 0, Cell.COLOR_BLOB)
        assert grid.get(1, 3) is Cell.HAZARD
        assert grid.get(4, 0) is Cell.COLOR_BLOB
        assert grid.get(3, 1) is Cell.EMPTY

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (5, 0), (0, 4), (5, 4)])
    def test_get_out_of_bounds(self, x: int, y: int) -> None:
        grid = Grid(5, 4)
        with pytest.raises(OutOfBoundsError, match="out of bounds"):
            grid.get(x, y)

    def test_negative_index_never_wraps(self) -> None:
        grid = Grid(3, 3)
        grid.set(2, 2, Cell.HAZARD)
        with pytest.raises(OutOfBoundsError):
            grid.get(-1, -1)

    def test_set_out_of_bounds(self) -> None:
        grid = Grid(2, 2)
        with pytest.raises(OutOfBoundsError):
            grid.set(2, 0, Cell.HAZARD)

    def test_out_of_bounds_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Grid(1, 1).get(1, 1)

    def test_in_bounds(self) -> None:
        grid = Grid(3, 2)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(2, 1)
        assert not grid.in_bounds(3, 1)
        assert not grid.in_bounds(0, -1)

    def test_count(self) -> None:
        grid = Grid(3, 3)
        grid.set(0, 0, Cell.HAZARD)
        grid.set(1, 1, Cell.HAZARD)
        grid.set(2, 2, Cell.COLOR_BLOB)
        assert grid.count(Cell.HAZARD) == 2
        assert grid.count(Cell.COLOR_BLOB) == 1
        assert grid.count(Cell.EMPTY) == 6


class TestGridFreeze:
    def test_set_after_freeze_rejected(self) -> None:
        grid = Grid(3, 3)
        grid.freeze()
        assert grid.frozen
        with pytest.raises(IllegalStateError, match="frozen"):
            grid.set(0, 0, Cell.HAZARD)
        assert grid.get(0, 0) is Cell.EMPTY

    def test_array_view_is_read_only(self) -> None:
        grid = Grid(2, 2)
        grid.set(1, 0, Cell.COLOR_BLOB)
        view = grid.as_array()
        assert view.shape == (2, 2)
        assert view[0, 1] == Cell.COLOR_BLOB
        with pytest.raises(ValueError):
            view[0, 0] = Cell.HAZARD


def test_coordinates_compare_as_tuples() -> None:
    assert Coordinates(1, 2) == (1, 2)
    assert Coordinates(x=3, y=4).y == 4
