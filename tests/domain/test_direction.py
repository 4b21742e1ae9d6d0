"""Tests for robot_gridsim.domain.direction module."""

from __future__ import annotations

import pytest

from robot_gridsim.domain.direction import CLOCKWISE_ORDER, Direction
from robot_gridsim.errors import InvalidArgumentError


class TestDisplacement:
    def test_unit_vectors(self) -> None:
        assert Direction.N.displacement() == (0, -1)
        assert Direction.E.displacement() == (1, 0)
        assert Direction.S.displacement() == (0, 1)
        assert Direction.W.displacement() == (-1, 0)

    def test_dx_dy_match_displacement(self) -> None:
        for direction in Direction:
            assert (direction.dx, direction.dy) == direction.displacement()

    def test_opposites_cancel(self) -> None:
        for direction in Direction:
            opposite = direction.clockwise().clockwise()
            assert direction.dx + opposite.dx == 0
            assert direction.dy + opposite.dy == 0


class TestClockwise:
    def test_cycle_order(self) -> None:
        assert Direction.N.clockwise() is Direction.E
        assert Direction.E.clockwise() is Direction.S
        assert Direction.S.clockwise() is Direction.W
        assert Direction.W.clockwise() is Direction.N

    def test_four_rotations_return_to_start(self) -> None:
        for direction in Direction:
            current = direction
            for _ in range(4):
                current = current.clockwise()
            assert current is direction

    def test_clockwise_order_starts_at_north(self) -> None:
        assert CLOCKWISE_ORDER == (Direction.N, Direction.E, Direction.S, Direction.W)


class TestParse:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("N", Direction.N), ("e", Direction.E), (" s ", Direction.S), (Direction.W, Direction.W)],
    )
    def test_valid(self, raw: object, expected: Direction) -> None:
        assert Direction.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["north", "", None, 0])
    def test_invalid(self, raw: object) -> None:
        with pytest.raises(InvalidArgumentError, match="direction must be one of"):
            Direction.parse(raw)
