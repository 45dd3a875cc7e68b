"""
Marketplace Synth - synthetic B2B marketplace records.

Generates RFQs (buyer requirements) and supplier profiles over a fixed
category -> subcategory taxonomy, keeps them in an explicit CorpusStore, and
answers statistics and filter queries over that store.

Core:
- TaxonomyCatalog: Frozen category -> subcategory tree (YAML package data)
- RandomSource / SeededRandomSource: The single source of randomness
- IdentifierFactory: Record IDs and synthetic registration numbers
- StaticDataPool: Pre-generated Faker names

Generation:
- RFQGenerator, SupplierGenerator: Per-record generators
- PopulationOrchestrator: Quick, comprehensive, demo and category population
- CorpusStore: In-memory corpus for one run

Read side:
- StatisticsAggregator: Counts, budget totals, rankings, recency
- QueryFacade: Conjunctive filters and lookups

Usage:
    from marketplace_synth import CorpusStore, PopulationOrchestrator, QueryFacade

    store = CorpusStore()
    PopulationOrchestrator(store, seed=42).populate_quick_rfqs(100)
    QueryFacade(store).filter_rfqs(keyword="agri")
"""

from .config import GenerationConfig
from .corpus import CorpusStore
from .generators import BaseRecordGenerator, GeneratorContext, RFQGenerator, SupplierGenerator
from .identifiers import IdentifierFactory
from .lookup import TaxonomyKeyedMap
from .orchestrator import PopulationOrchestrator, PopulationReport
from .query import QueryFacade
from .random_source import RandomSource, SeededRandomSource
from .records import (
    RFQ,
    CompanyType,
    ContactPerson,
    RFQStatus,
    Scenario,
    SupplierAddress,
    SupplierContact,
    SupplierProfile,
    Urgency,
)
from .static_pool import StaticDataPool
from .statistics import (
    BudgetSummary,
    MoneyRange,
    StatisticsAggregator,
    format_lakhs,
    parse_money_lakhs,
)
from .taxonomy import TaxonomyCatalog, TaxonomyValidationError, UnknownTaxonomyKey

__version__ = "0.1.0"

__all__ = [
    # Taxonomy
    "TaxonomyCatalog",
    "TaxonomyKeyedMap",
    "UnknownTaxonomyKey",
    "TaxonomyValidationError",
    # Randomness and identifiers
    "RandomSource",
    "SeededRandomSource",
    "IdentifierFactory",
    "StaticDataPool",
    # Records
    "RFQ",
    "ContactPerson",
    "SupplierProfile",
    "SupplierAddress",
    "SupplierContact",
    "Urgency",
    "RFQStatus",
    "CompanyType",
    "Scenario",
    # Generation
    "GenerationConfig",
    "GeneratorContext",
    "BaseRecordGenerator",
    "RFQGenerator",
    "SupplierGenerator",
    "CorpusStore",
    "PopulationOrchestrator",
    "PopulationReport",
    # Read side
    "StatisticsAggregator",
    "BudgetSummary",
    "MoneyRange",
    "parse_money_lakhs",
    "format_lakhs",
    "QueryFacade",
]
