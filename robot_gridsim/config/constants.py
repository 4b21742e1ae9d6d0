"""Centralized domain constants for the grid simulator.

Defaults shared by the builder, the walk runner and the CLI are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_NO_MOVE_PROBABILITY = 0.1
"""Default probability that a legal forward move leaves the robot in place."""

DEFAULT_DOUBLE_MOVE_PROBABILITY = 0.1
"""Default probability that a legal forward move attempts a two-cell overshoot."""

GRID_WIDTH = 10
"""Default CLI grid width in cells."""

GRID_HEIGHT = 10
"""Default CLI grid height in cells."""

START_X = 0
"""Default CLI robot start column."""

START_Y = 0
"""Default CLI robot start row."""

START_DIRECTION = "E"
"""Default CLI robot facing."""

SIM_SEED = 0
"""Default CLI seed for the motion-noise random source."""

WALK_STEPS = 50
"""Default number of policy steps when no command string is given."""

MOVE_COMMAND = "F"
"""Command character: attempt one forward move."""

TURN_COMMAND = "R"
"""Command character: rotate clockwise."""

COMMAND_ALPHABET: frozenset[str] = frozenset({MOVE_COMMAND, TURN_COMMAND})
"""All characters accepted in a walk command string."""
