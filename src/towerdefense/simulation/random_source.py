"""Random sources for the probability gates in combat.

Everything random in a playthrough (tower accuracy rolls and shield
rolls) draws from one injected source, in turn order.  Seeding that
source makes a whole playthrough reproducible.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def next_uniform(self) -> float:
        ...


class SeededRandomSource:
    """Wraps a private ``random.Random`` so the global generator is untouched."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def next_uniform(self) -> float:
        return self._random.random()


class FixedRandomSource:
    """Replays a fixed sequence of values, cycling when it runs out.

    Used to pin exact outcomes in tests, e.g. ``FixedRandomSource([0.0])``
    makes every tower hit and lets every hit through a shield.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("FixedRandomSource needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"value {value!r} is outside [0, 1)")
        self._index = 0
        self.draws = 0

    def next_uniform(self) -> float:
        value = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        self.draws += 1
        return value
