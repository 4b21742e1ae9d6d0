"""Behavioral contract for a single-robot grid simulator."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RobotSimulator(ABC):
    """Operations a controller may use to drive and sense the robot."""

    @property
    @abstractmethod
    def x(self) -> int:
        """Current column."""

    @property
    @abstractmethod
    def y(self) -> int:
        """Current row."""

    @abstractmethod
    def move_forward(self) -> bool:
        """Try to move one cell ahead.

        Returns False if the cell ahead is a hazard or off the map (nothing
        changes). Returns True otherwise, even when imperfect motion keeps the
        robot in place or carries it one extra cell.
        """

    @abstractmethod
    def turn_clockwise(self) -> None:
        """Rotate 90 degrees clockwise."""

    @abstractmethod
    def detect_hazard(self) -> bool:
        """True if the cell ahead is a hazard or off the map."""

    @abstractmethod
    def detect_blobs(self) -> tuple[bool, bool, bool, bool]:
        """Color-blob presence in the N, E, S, W neighbors, regardless of facing."""
