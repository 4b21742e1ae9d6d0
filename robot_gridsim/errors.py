"""Error kinds raised while configuring or building a simulation.

Each concrete error also derives from the closest built-in exception so that
callers catching ``ValueError`` / ``RuntimeError`` / ``IndexError`` keep working.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories."""

    INVALID_ARGUMENT = "invalid_argument"
    ILLEGAL_STATE = "illegal_state"
    OUT_OF_BOUNDS = "out_of_bounds"


class SimulationError(Exception):
    """Base class for all simulator errors."""

    kind: ErrorKind


class InvalidArgumentError(SimulationError, ValueError):
    """Malformed construction input."""

    kind = ErrorKind.INVALID_ARGUMENT


class IllegalStateError(SimulationError, RuntimeError):
    """Operation invoked in a state that does not allow it."""

    kind = ErrorKind.ILLEGAL_STATE


class OutOfBoundsError(SimulationError, IndexError):
    """Coordinate outside the grid."""

    kind = ErrorKind.OUT_OF_BOUNDS
