"""Cardinal directions with unit displacements and clockwise rotation.

Screen coordinates: x grows to the east, y grows to the south, so north is
``(0, -1)``.
"""

from __future__ import annotations

from enum import Enum

from robot_gridsim.errors import InvalidArgumentError


class Direction(Enum):
    """Robot facing."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @classmethod
    def parse(cls, raw: object) -> Direction:
        """Parse a direction name (case-insensitive) or pass a Direction through."""
        if isinstance(raw, Direction):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().upper())
            except ValueError:
                pass
        valid = ", ".join(d.value for d in cls)
        raise InvalidArgumentError(f"direction must be one of {valid}, got {raw!r}")

    def displacement(self) -> tuple[int, int]:
        return _DISPLACEMENTS[self]

    @property
    def dx(self) -> int:
        return _DISPLACEMENTS[self][0]

    @property
    def dy(self) -> int:
        return _DISPLACEMENTS[self][1]

    def clockwise(self) -> Direction:
        """Next direction in the cycle N -> E -> S -> W -> N."""
        index = CLOCKWISE_ORDER.index(self)
        return CLOCKWISE_ORDER[(index + 1) % len(CLOCKWISE_ORDER)]


CLOCKWISE_ORDER: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)
"""Fixed rotation cycle; also the reporting order of blob detection."""

_DISPLACEMENTS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}
