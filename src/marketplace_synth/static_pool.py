"""
StaticDataPool - pre-generated Faker person names for O(1) sampling.

Faker is called once per pool slot at construction; generators then draw
from the pools through the run's RandomSource, so a seeded source yields the
same names on every run.

Usage:
    pool = StaticDataPool(source)
    pool.full_name()     # 'Aarav Sharma'
    pool.first_name()
    pool.last_name()
"""

from __future__ import annotations

from collections.abc import Callable

from faker import Faker

from .random_source import RandomSource

DEFAULT_LOCALE = "en_IN"

# Default pool sizes - enough variety for several thousand records
DEFAULT_POOL_SIZES = {
    "first_names": 400,
    "last_names": 200,
}


class StaticDataPool:
    """
    Pre-generated pools of Faker data sampled via a RandomSource.

    Attributes:
        seed: Seed the Faker instance was created with
        first_names: Pool of given names
        last_names: Pool of family names
    """

    def __init__(
        self,
        source: RandomSource,
        locale: str = DEFAULT_LOCALE,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        """
        Build the pools.

        Args:
            source: Draws the Faker seed and every later sample
            locale: Faker locale for the generated names
            pool_sizes: Optional dict overriding DEFAULT_POOL_SIZES
        """
        self.source = source
        self.seed = source.spawn_seed()
        sizes = {**DEFAULT_POOL_SIZES, **(pool_sizes or {})}

        self._faker = Faker(locale)
        self._faker.seed_instance(self.seed)

        self.first_names: list[str] = self._generate_pool(
            self._faker.first_name, sizes["first_names"]
        )
        self.last_names: list[str] = self._generate_pool(
            self._faker.last_name, sizes["last_names"]
        )

    @staticmethod
    def _generate_pool(generator_func: Callable[[], str], size: int) -> list[str]:
        """
        Generate up to `size` unique single-token values.

        Stops early if uniqueness cannot be reached in 3x attempts; the pool
        is then smaller rather than padded with duplicates.
        """
        pool: list[str] = []
        seen: set[str] = set()
        max_attempts = size * 3
        attempts = 0

        while len(pool) < size and attempts < max_attempts:
            value = generator_func().strip()
            attempts += 1
            # Multi-word values would break the "first last" name shape
            if not value or " " in value or value in seen:
                continue
            seen.add(value)
            pool.append(value)

        if not pool:
            raise ValueError(f"Faker produced no usable values for {generator_func!r}")
        return pool

    def first_name(self) -> str:
        return self.source.pick(self.first_names)

    def last_name(self) -> str:
        return self.source.pick(self.last_names)

    def full_name(self) -> str:
        return f"{self.first_name()} {self.last_name()}"

    def get_pool_sizes(self) -> dict[str, int]:
        """Return the actual sizes of all pools."""
        return {"first_names": len(self.first_names), "last_names": len(self.last_names)}
