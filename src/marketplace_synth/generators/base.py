"""
Base classes for record generators.

This module provides:
- GeneratorContext: Shared state dataclass passed to all generators
- BaseRecordGenerator: Abstract base class for RFQ and supplier generators

Design Principles:
- Context owns every collaborator with state (random source, ID counter,
  name pools); generators hold no state of their own
- One context per run: generators sharing a context share the ID counter
- Taxonomy keys are validated before any random draw, so a bad key fails
  fast without consuming randomness
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, cast

from ..config import GenerationConfig
from ..identifiers import IdentifierFactory
from ..random_source import RandomSource, SeededRandomSource
from ..static_pool import StaticDataPool
from ..taxonomy import TaxonomyCatalog


@dataclass
class GeneratorContext:
    """
    Shared state for all record generators.

    Attributes:
        catalog: Frozen taxonomy every generated pair must belong to
        source: The run's single RandomSource
        config: Generation defaults
        clock: Callable returning "now"; drives ID timestamps and created_date
        ids: IdentifierFactory (built from source and clock if omitted)
        pool: StaticDataPool of Faker names (built from source if omitted)
    """

    catalog: TaxonomyCatalog
    source: RandomSource
    config: GenerationConfig = field(default_factory=GenerationConfig)
    clock: Callable[[], datetime] = datetime.now
    ids: IdentifierFactory | None = None
    pool: StaticDataPool | None = None

    def __post_init__(self) -> None:
        if self.ids is None:
            self.ids = IdentifierFactory(self.source, self.clock)
        if self.pool is None:
            self.pool = StaticDataPool(self.source)

    @classmethod
    def create(
        cls,
        seed: int | None = None,
        catalog: TaxonomyCatalog | None = None,
        config: GenerationConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> GeneratorContext:
        """
        Convenience constructor from a seed.

        Args:
            seed: Seed for SeededRandomSource (None for non-deterministic)
            catalog: Taxonomy (bundled default if None)
            config: Generation config (defaults if None)
            clock: "now" provider
        """
        return cls(
            catalog=catalog or TaxonomyCatalog.default(),
            source=SeededRandomSource(seed),
            config=config or GenerationConfig(),
            clock=clock,
        )


class BaseRecordGenerator(ABC):
    """
    Abstract base class for record generators.

    Subclasses implement generate_single(); bulk helpers are built on top of
    it. All randomness comes from self.source.
    """

    #: Prefix used for log lines and record IDs
    RECORD_KIND = "record"

    def __init__(self, ctx: GeneratorContext) -> None:
        """
        Initialize generator with shared context.

        Args:
            ctx: Shared GeneratorContext instance
        """
        self.ctx = ctx

    @abstractmethod
    def generate_single(self, category: str, subcategory: str, *args: Any, **kwargs: Any) -> Any:
        """Build one record for a (category, subcategory) pair."""

    @property
    def source(self) -> RandomSource:
        """Convenience accessor for the run's random source."""
        return self.ctx.source

    @property
    def ids(self) -> IdentifierFactory:
        return cast(IdentifierFactory, self.ctx.ids)

    @property
    def pool(self) -> StaticDataPool:
        return cast(StaticDataPool, self.ctx.pool)

    @property
    def catalog(self) -> TaxonomyCatalog:
        return self.ctx.catalog

    @property
    def config(self) -> GenerationConfig:
        return self.ctx.config
