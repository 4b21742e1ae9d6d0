"""Configuration dataclasses for simulation construction and walk runs.

All frozen dataclasses validate themselves in ``__post_init__`` so an invalid
instance never exists.
"""

from __future__ import annotations

from dataclasses import dataclass

from robot_gridsim.config.constants import (
    COMMAND_ALPHABET,
    DEFAULT_DOUBLE_MOVE_PROBABILITY,
    DEFAULT_NO_MOVE_PROBABILITY,
)
from robot_gridsim.errors import InvalidArgumentError

__all__ = [
    "MotionNoiseConfig",
    "WalkConfig",
    "check_probability",
]


def check_probability(value: object, name: str) -> float:
    """Return ``value`` as float, rejecting booleans, non-numbers and values outside [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    prob = float(value)
    if not 0.0 <= prob <= 1.0:
        raise InvalidArgumentError(f"{name} must be in [0.0, 1.0], got {prob}")
    return prob


@dataclass(frozen=True)
class MotionNoiseConfig:
    """Imperfect-motion probabilities and the draw boundaries derived from them.

    A uniform draw ``r`` in [0, 1) is partitioned as::

        r <= no_move_boundary                          -> stay in place
        no_move_boundary < r <= double_move_boundary   -> single step
        r > double_move_boundary                       -> attempt double step
    """

    p_no_move: float = DEFAULT_NO_MOVE_PROBABILITY
    p_double_move: float = DEFAULT_DOUBLE_MOVE_PROBABILITY

    def __post_init__(self) -> None:
        check_probability(self.p_no_move, "p_no_move")
        check_probability(self.p_double_move, "p_double_move")
        if self.p_no_move + self.p_double_move > 1.0:
            raise InvalidArgumentError(
                "p_no_move + p_double_move must be <= 1.0, got "
                f"{self.p_no_move + self.p_double_move}"
            )

    @property
    def no_move_boundary(self) -> float:
        return float(self.p_no_move)

    @property
    def double_move_boundary(self) -> float:
        # 1.0 - p can round below p_no_move when the probabilities sum to exactly 1.
        return max(1.0 - float(self.p_double_move), float(self.p_no_move))


@dataclass(frozen=True)
class WalkConfig:
    """What the walk runner executes: an explicit command string or N policy steps."""

    commands: str | None = None
    """Sequence over ``F`` (forward) and ``R`` (turn clockwise); overrides ``steps``."""
    steps: int = 0
    """Hazard-avoiding policy iterations, used only when ``commands`` is None."""

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise InvalidArgumentError("steps must be >= 0")
        if self.commands is not None:
            unknown = sorted(set(self.commands) - COMMAND_ALPHABET)
            if unknown:
                valid = ", ".join(sorted(COMMAND_ALPHABET))
                raise InvalidArgumentError(
                    f"commands may only contain {valid}; got {''.join(unknown)!r}"
                )
