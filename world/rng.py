"""
aquarium_sim module: world/rng.py

Randomness sources:
- RandomRangeSource: non-deterministic sampling for spawn/reset of agents
- SeededLayoutGenerator: deterministic source for the castle masonry, re-seeded
  before every use so repeated redraws are identical
"""

from __future__ import annotations
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomRangeSource:
    """
    Thin wrapper around ``random.Random`` with half-open range helpers.

    Pass a seed only when reproducibility is wanted (tests); the simulation
    uses an unseeded instance for agent spawning.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def uniform(self, lo: float, hi: float) -> float:
        """Float in [lo, hi). An empty range collapses to lo."""
        if hi <= lo:
            return lo
        return lo + (hi - lo) * self._rng.random()

    def randint(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi)."""
        if hi <= lo:
            return lo
        return self._rng.randrange(lo, hi)

    def choice(self, items: Sequence[T]) -> T:
        return items[self._rng.randrange(len(items))]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        return self._rng.choices(items, weights=weights, k=1)[0]

    def coin(self, p: float = 0.5) -> bool:
        return self._rng.random() < p

    def bits(self, n: int = 64) -> int:
        return self._rng.getrandbits(n)


class SeededLayoutGenerator(RandomRangeSource):
    """
    Deterministic generator bound to one seed for the lifetime of a basin.
    """

    def __init__(self, seed: int):
        self.seed = seed
        super().__init__(seed)

    def reseed(self) -> "SeededLayoutGenerator":
        self._rng.seed(self.seed)
        return self


# shared source for spawn-time randomisation
spawn_rng = RandomRangeSource()
