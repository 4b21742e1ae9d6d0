"""Domain layer: cells, grid and direction algebra."""

from robot_gridsim.domain.direction import CLOCKWISE_ORDER, Direction
from robot_gridsim.domain.grid import Cell, Coordinates, Grid

__all__ = [
    "CLOCKWISE_ORDER",
    "Cell",
    "Coordinates",
    "Direction",
    "Grid",
]
