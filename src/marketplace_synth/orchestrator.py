"""
PopulationOrchestrator - fills a CorpusStore using the record generators.

Population modes:
- quick RFQs: N RFQs sampled from the first K categories, random scenario
- comprehensive RFQs: every (category, subcategory) x scenario x K
- all suppliers: 5-10 per subcategory across the full taxonomy
- demo suppliers: first 5 categories, at most 10 suppliers each
- category suppliers: one category's suppliers

Quick, comprehensive, all and demo modes REPLACE the corresponding record
list. Category mode APPENDS to the supplier list. Callers that want a clean
category-only corpus should call store.replace_suppliers([]) first.

Usage:
    store = CorpusStore()
    orch = PopulationOrchestrator(store, seed=42, verbose=True)
    report = orch.populate_comprehensive_rfqs()
    print(report.corpus_size, report.elapsed_ms)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from .config import GenerationConfig
from .corpus import CorpusStore
from .generators.base import GeneratorContext
from .generators.rfq import RFQGenerator
from .generators.supplier import SupplierGenerator
from .random_source import RandomSource, SeededRandomSource
from .records import RFQ, Scenario, SupplierProfile
from .taxonomy import TaxonomyCatalog

QUICK_SCENARIOS = list(Scenario)


@dataclass(frozen=True)
class PopulationReport:
    """
    Outcome of one population call.

    Attributes:
        mode: Population mode name ("quick_rfqs", "category_suppliers", ...)
        records_generated: Records produced by this call
        corpus_size: Size of the affected record list after the call
        categories_covered: Distinct categories in the affected record list
        subcategories_covered: Distinct (category, subcategory) pairs in it
        elapsed_ms: Wall-clock generation time in milliseconds
    """

    mode: str
    records_generated: int
    corpus_size: int
    categories_covered: int
    subcategories_covered: int
    elapsed_ms: float

    def to_dict(self) -> dict[str, str | int | float]:
        return {
            "mode": self.mode,
            "records_generated": self.records_generated,
            "corpus_size": self.corpus_size,
            "categories_covered": self.categories_covered,
            "subcategories_covered": self.subcategories_covered,
            "elapsed_ms": self.elapsed_ms,
        }


class PopulationOrchestrator:
    """
    Drives RFQGenerator and SupplierGenerator into a CorpusStore.

    One orchestrator owns one GeneratorContext, so every record it produces
    shares the same random source and ID counter.
    """

    def __init__(
        self,
        store: CorpusStore,
        catalog: TaxonomyCatalog | None = None,
        source: RandomSource | None = None,
        config: GenerationConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
        verbose: bool = False,
        seed: int | None = None,
    ) -> None:
        """
        Args:
            store: Corpus to populate
            catalog: Taxonomy (bundled default if None)
            source: Random source (SeededRandomSource(seed) if None)
            config: Generation defaults
            clock: "now" provider for IDs and created dates
            verbose: Print progress lines
            seed: Seed used only when source is None
        """
        self.store = store
        self.verbose = verbose
        self.ctx = GeneratorContext(
            catalog=catalog or TaxonomyCatalog.default(),
            source=source or SeededRandomSource(seed),
            config=config or GenerationConfig(),
            clock=clock,
        )
        self.rfq_generator = RFQGenerator(self.ctx)
        self.supplier_generator = SupplierGenerator(self.ctx)

    @property
    def catalog(self) -> TaxonomyCatalog:
        return self.ctx.catalog

    @property
    def config(self) -> GenerationConfig:
        return self.ctx.config

    # ------------------------------------------------------------------
    # RFQ population
    # ------------------------------------------------------------------

    def populate_quick_rfqs(self, count: int | None = None) -> PopulationReport:
        """
        Replace the RFQ corpus with `count` RFQs from the first K categories.

        Args:
            count: Number of RFQs (config.quick_rfq_count if None)

        Raises:
            ValueError: If count is negative
        """
        count = self.config.quick_rfq_count if count is None else count
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        subset = self.catalog.head(self.config.quick_category_limit)
        categories = subset.all_categories()
        source = self.ctx.source

        self._log_start(f"Quick RFQ population: {count:,} RFQs from {len(categories)} categories")
        start = time.time()
        rfqs: list[RFQ] = []
        for _ in range(count):
            category = source.pick(categories)
            subcategory = source.pick(subset.subcategories_of(category))
            scenario = source.pick(QUICK_SCENARIOS)
            rfqs.append(self.rfq_generator.generate_single(category, subcategory, scenario))
        self.store.replace_rfqs(rfqs)
        return self._finish("quick_rfqs", len(rfqs), self.store.rfqs, start)

    def populate_comprehensive_rfqs(
        self,
        per_scenario: int | None = None,
        scenarios: Sequence[Scenario | str] | None = None,
    ) -> PopulationReport:
        """
        Replace the RFQ corpus with full taxonomy coverage.

        Every (category, subcategory) pair gets `per_scenario` RFQs for each
        scenario, so the corpus size is
        subcategory_count x per_scenario x len(scenarios).

        Args:
            per_scenario: RFQs per pair per scenario (config default if None)
            scenarios: Scenario cycle (config default if None)

        Raises:
            ValueError: On negative per_scenario, empty or unknown scenarios
        """
        per_scenario = self.config.rfqs_per_scenario if per_scenario is None else per_scenario
        if per_scenario < 0:
            raise ValueError(f"per_scenario must be >= 0, got {per_scenario}")
        cycle = [
            Scenario.parse(s)
            for s in (self.config.comprehensive_scenarios if scenarios is None else scenarios)
        ]
        if not cycle:
            raise ValueError("scenarios must not be empty")

        expected = self.catalog.subcategory_count() * per_scenario * len(cycle)
        self._log_start(
            f"Comprehensive RFQ population: {len(self.catalog)} categories, "
            f"{self.catalog.subcategory_count()} subcategories, "
            f"{len(cycle)} scenarios -> {expected:,} RFQs"
        )
        start = time.time()
        rfqs: list[RFQ] = []
        for category, subcategory in self.catalog.pairs():
            for scenario in cycle:
                for _ in range(per_scenario):
                    rfqs.append(
                        self.rfq_generator.generate_single(category, subcategory, scenario)
                    )
        self.store.replace_rfqs(rfqs)
        return self._finish("comprehensive_rfqs", len(rfqs), self.store.rfqs, start)

    # ------------------------------------------------------------------
    # Supplier population
    # ------------------------------------------------------------------

    def populate_all_suppliers(self) -> PopulationReport:
        """Replace the supplier corpus with suppliers for every category."""
        self._log_start(
            f"Supplier population: {len(self.catalog)} categories, "
            f"{self.catalog.subcategory_count()} subcategories"
        )
        start = time.time()
        suppliers = self.supplier_generator.generate_all()
        self.store.replace_suppliers(suppliers)
        return self._finish("all_suppliers", len(suppliers), self.store.suppliers, start)

    def populate_demo_suppliers(self) -> PopulationReport:
        """
        Replace the supplier corpus with a small demo set.

        Generates a full category's suppliers for each of the first
        config.demo_category_limit categories and keeps the first
        config.demo_suppliers_per_category of each.
        """
        limit = self.config.demo_category_limit
        cap = self.config.demo_suppliers_per_category
        self._log_start(f"Demo supplier population: {limit} categories, up to {cap} each")
        start = time.time()
        suppliers: list[SupplierProfile] = []
        for category in self.catalog.head(limit).all_categories():
            suppliers.extend(self.supplier_generator.generate_for_category(category)[:cap])
        self.store.replace_suppliers(suppliers)
        return self._finish("demo_suppliers", len(suppliers), self.store.suppliers, start)

    def generate_category_suppliers(self, category: str) -> PopulationReport:
        """
        Generate one category's suppliers and APPEND them to the corpus.

        Raises:
            UnknownTaxonomyKey: If the category is not in the catalog
        """
        self.catalog.require(category)
        self._log_start(f"Generating suppliers for category: {category}")
        start = time.time()
        suppliers = self.supplier_generator.generate_for_category(category)
        self.store.append_suppliers(suppliers)
        return self._finish("category_suppliers", len(suppliers), self.store.suppliers, start)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _log_start(self, message: str) -> None:
        if self.verbose:
            print(f"  {message}...")

    def _finish(
        self,
        mode: str,
        generated: int,
        corpus: Sequence[RFQ] | Sequence[SupplierProfile],
        start: float,
    ) -> PopulationReport:
        elapsed_ms = (time.time() - start) * 1000
        categories, pairs = _coverage(corpus)
        report = PopulationReport(
            mode=mode,
            records_generated=generated,
            corpus_size=len(corpus),
            categories_covered=len(categories),
            subcategories_covered=len(pairs),
            elapsed_ms=elapsed_ms,
        )
        if self.verbose:
            print(f"    Generated: {generated:,} records in {elapsed_ms:,.0f}ms")
            print(
                f"    Corpus: {report.corpus_size:,} records, "
                f"{report.categories_covered} categories, "
                f"{report.subcategories_covered} subcategories"
            )
        return report


def _coverage(records: Iterable[RFQ | SupplierProfile]) -> tuple[set[str], set[tuple[str, str]]]:
    """Distinct categories and (category, subcategory) pairs in records."""
    categories: set[str] = set()
    pairs: set[tuple[str, str]] = set()
    for record in records:
        if isinstance(record, RFQ):
            categories.add(record.category)
            pairs.add((record.category, record.subcategory))
        else:
            categories.update(record.categories)
            for category in record.categories:
                pairs.update((category, sub) for sub in record.subcategories)
    return categories, pairs
