"""Random sources for imperfect motion.

The engine only needs ``random() -> float`` in [0, 1), so ``random.Random``
satisfies :class:`RandomSource` as-is. :class:`ScriptedRandom` replays a fixed
sequence for reproducible tests and demos.
"""

from __future__ import annotations

from itertools import cycle
from typing import Iterable, Protocol, runtime_checkable

from robot_gridsim.errors import InvalidArgumentError


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float: ...


class ScriptedRandom:
    """Yields the given values in order, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(v) for v in values)
        if not self._values:
            raise InvalidArgumentError("ScriptedRandom needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise InvalidArgumentError(f"scripted values must be in [0.0, 1.0), got {value}")
        self._iter = cycle(self._values)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return next(self._iter)
