"""
Random selection utilities - the single source of non-determinism.

Every random draw made by the generators goes through a RandomSource, so a
seeded source makes a whole population run reproducible:

    source = SeededRandomSource(seed=42)
    source.pick(["High", "Medium", "Low"])
    source.weighted_pick(["Active", "In Progress", "Closed"], [3, 1, 1])

SeededRandomSource(seed=None) draws fresh OS entropy and is the default
production source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(ABC):
    """
    Interface for uniform and weighted selection.

    Implementations only need to supply next(); every other method is
    derived from it, which keeps subclasses for tests trivial.
    """

    @abstractmethod
    def next(self) -> float:
        """Return a float uniformly distributed in [0, 1)."""

    def randint(self, low: int, high: int) -> int:
        """Uniform integer in the closed range [low, high]."""
        if high < low:
            raise ValueError(f"Empty range: [{low}, {high}]")
        return low + int(self.next() * (high - low + 1))

    def uniform(self, low: float, high: float) -> float:
        """Uniform float in [low, high)."""
        return low + (high - low) * self.next()

    def pick(self, candidates: Sequence[T]) -> T:
        """
        Uniform choice from a non-empty sequence.

        Raises:
            ValueError: If candidates is empty
        """
        if not candidates:
            raise ValueError("Cannot pick from an empty candidate list")
        return candidates[self.randint(0, len(candidates) - 1)]

    def weighted_pick(self, candidates: Sequence[T], weights: Sequence[float]) -> T:
        """
        Choice from candidates with probability proportional to weights.

        Args:
            candidates: Values to choose from
            weights: Non-negative relative weights, same length as candidates

        Raises:
            ValueError: On length mismatch, empty input or non-positive total
        """
        if not candidates:
            raise ValueError("Cannot pick from an empty candidate list")
        if len(candidates) != len(weights):
            raise ValueError(
                f"Got {len(candidates)} candidates but {len(weights)} weights"
            )
        if any(w < 0 for w in weights):
            raise ValueError(f"Weights must be non-negative: {list(weights)}")
        total = float(sum(weights))
        if total <= 0:
            raise ValueError("Weights must sum to a positive value")

        target = self.next() * total
        cumulative = 0.0
        for candidate, weight in zip(candidates, weights):
            cumulative += weight
            if target < cumulative:
                return candidate
        # Float rounding can leave target == total; fall back to last positive weight
        for candidate, weight in zip(reversed(candidates), reversed(weights)):
            if weight > 0:
                return candidate
        raise AssertionError("unreachable")

    def sample_prefix(self, items: Sequence[T], low: int, high: int) -> list[T]:
        """First n items where n is uniform in [low, high], clamped to len(items)."""
        n = self.randint(low, high)
        return list(items[: min(n, len(items))])

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a new list with the items in random order (Fisher-Yates)."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def digits(self, n: int) -> str:
        """String of n random decimal digits (leading zeros allowed)."""
        return "".join(str(self.randint(0, 9)) for _ in range(n))

    def letters(self, n: int) -> str:
        """String of n random uppercase ASCII letters."""
        return "".join(chr(65 + self.randint(0, 25)) for _ in range(n))

    def spawn_seed(self) -> int:
        """Draw a seed for a dependent generator (e.g. a Faker instance)."""
        return self.randint(0, 2**31 - 2)


class SeededRandomSource(RandomSource):
    """
    RandomSource backed by a NumPy Generator.

    Identical seeds produce identical draw sequences. A seed of None seeds
    from OS entropy.

    Attributes:
        seed: Seed the generator was created with (None if unseeded)
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng: np.random.Generator = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())

    def reset(self, seed: int | None = None) -> None:
        """
        Restart the draw sequence.

        Args:
            seed: New seed (uses original seed if None)
        """
        self._rng = np.random.default_rng(seed if seed is not None else self.seed)
