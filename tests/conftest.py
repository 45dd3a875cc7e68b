"""
Pytest fixtures for marketplace_synth tests.

Provides:
- Seeded random source and a pinned clock
- The bundled taxonomy catalog
- Generator context, fresh corpus store and orchestrator
- make_rfq: hand-built RFQ records for statistics and query tests
"""

from datetime import datetime

import pytest

from marketplace_synth import (
    RFQ,
    ContactPerson,
    CorpusStore,
    GeneratorContext,
    PopulationOrchestrator,
    RFQStatus,
    Scenario,
    SeededRandomSource,
    TaxonomyCatalog,
    Urgency,
)

SEED = 42
FIXED_NOW = datetime(2024, 6, 15, 10, 30, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    return fixed_clock


@pytest.fixture
def source():
    """SeededRandomSource(seed=42)."""
    return SeededRandomSource(seed=SEED)


@pytest.fixture(scope="session")
def catalog():
    """The bundled 50-category taxonomy."""
    return TaxonomyCatalog.default()


@pytest.fixture
def ctx(catalog, source, clock):
    """GeneratorContext over the bundled taxonomy with a seeded source."""
    return GeneratorContext(catalog=catalog, source=source, clock=clock)


@pytest.fixture
def store():
    """Empty CorpusStore."""
    return CorpusStore()


@pytest.fixture
def orchestrator(store, catalog, clock):
    """Seeded, silent orchestrator writing into `store`."""
    return PopulationOrchestrator(store, catalog=catalog, clock=clock, seed=SEED)


@pytest.fixture
def make_rfq():
    """Factory for hand-built RFQs with overridable fields."""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> RFQ:
        n = next(counter)
        fields = {
            "id": f"rfq_test_{n:04d}",
            "title": f"Test requirement {n}",
            "category": "Agriculture",
            "subcategory": "Agriculture Equipment",
            "description": "Hand-built RFQ for tests",
            "quantity": "100 units",
            "budget": "₹50 Lakh",
            "location": "Mumbai, Maharashtra",
            "urgency": Urgency.HIGH,
            "deadline": "15 days",
            "specifications": ["High quality"],
            "business_type": "Manufacturing",
            "contact_person": ContactPerson(
                name="Priya Sharma",
                designation="Procurement Manager",
                company="Apex Group",
                phone="+91 9812345678",
                email="priya.sharma@apexgroup.com",
            ),
            "created_date": "2024-06-14",
            "status": RFQStatus.ACTIVE,
            "tags": ("agriculture", "agriculture equipment", "manufacturing"),
            "scenario": Scenario.ENTERPRISE,
        }
        fields.update(overrides)
        return RFQ(**fields)

    return _make
