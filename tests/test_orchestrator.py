"""
Tests for PopulationOrchestrator and CorpusStore.

Covers replace-vs-append semantics of every mode, comprehensive corpus
size, coverage reporting and determinism.
"""

import pytest

from marketplace_synth import (
    CorpusStore,
    GenerationConfig,
    PopulationOrchestrator,
    RFQStatus,
    Scenario,
    TaxonomyCatalog,
    UnknownTaxonomyKey,
)

SMALL_TAXONOMY = {
    "Agriculture": ["Agriculture Equipment", "Fresh Flowers", "Animal Feed"],
    "Chemical": ["Catalysts", "Specialty Chemicals"],
}


@pytest.fixture
def small_catalog():
    return TaxonomyCatalog(SMALL_TAXONOMY)


class TestQuickMode:
    """Tests for populate_quick_rfqs()."""

    def test_second_call_replaces(self, orchestrator, store):
        """Two quick runs leave only the second run's RFQs."""
        orchestrator.populate_quick_rfqs(30)
        first_ids = {rfq.id for rfq in store.rfqs}
        report = orchestrator.populate_quick_rfqs(12)
        assert len(store.rfqs) == 12
        assert report.corpus_size == 12
        assert report.records_generated == 12
        assert first_ids.isdisjoint(rfq.id for rfq in store.rfqs)

    def test_default_count(self, orchestrator, store):
        """Default count is 100."""
        orchestrator.populate_quick_rfqs()
        assert len(store.rfqs) == 100

    def test_first_ten_categories_only(self, orchestrator, store, catalog):
        """Quick mode samples the first 10 categories."""
        orchestrator.populate_quick_rfqs(200)
        allowed = set(catalog.all_categories()[:10])
        assert {rfq.category for rfq in store.rfqs} <= allowed

    def test_pairs_valid(self, orchestrator, store, catalog):
        """Every quick RFQ has a valid taxonomy pair."""
        orchestrator.populate_quick_rfqs(100)
        for rfq in store.rfqs:
            assert catalog.contains(rfq.category, rfq.subcategory)

    def test_negative_count(self, orchestrator):
        """Negative counts raise ValueError."""
        with pytest.raises(ValueError):
            orchestrator.populate_quick_rfqs(-1)

    def test_leaves_suppliers_alone(self, orchestrator, store):
        """RFQ population does not touch suppliers."""
        orchestrator.populate_demo_suppliers()
        before = list(store.suppliers)
        orchestrator.populate_quick_rfqs(5)
        assert store.suppliers == before


class TestComprehensiveMode:
    """Tests for populate_comprehensive_rfqs()."""

    def test_size_formula_default(self, orchestrator, store, catalog):
        """Corpus size = subcategories x 1 x 3 scenarios by default."""
        report = orchestrator.populate_comprehensive_rfqs()
        assert len(store.rfqs) == catalog.subcategory_count() * 1 * 3
        assert report.categories_covered == len(catalog)
        assert report.subcategories_covered == catalog.subcategory_count()

    def test_size_formula_custom(self, store, small_catalog, clock):
        """Corpus size = subcategories x K x len(scenarios)."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=1)
        orch.populate_comprehensive_rfqs(per_scenario=4, scenarios=["enterprise", "startup"])
        assert len(store.rfqs) == 5 * 4 * 2
        assert {rfq.scenario for rfq in store.rfqs} == {Scenario.ENTERPRISE, Scenario.STARTUP}

    def test_replaces(self, store, small_catalog, clock):
        """Comprehensive mode replaces a quick corpus."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=1)
        orch.populate_quick_rfqs(50)
        orch.populate_comprehensive_rfqs()
        assert len(store.rfqs) == 5 * 3

    def test_ids_distinct(self, orchestrator, store):
        """No duplicate IDs within a run."""
        orchestrator.populate_comprehensive_rfqs()
        assert len({rfq.id for rfq in store.rfqs}) == len(store.rfqs)

    def test_empty_scenarios(self, orchestrator):
        """An empty scenario list is rejected."""
        with pytest.raises(ValueError):
            orchestrator.populate_comprehensive_rfqs(scenarios=[])


class TestSupplierModes:
    """Tests for supplier population modes."""

    def test_demo_suppliers(self, orchestrator, store, catalog):
        """Demo mode keeps 10 suppliers from each of the first 5 categories."""
        report = orchestrator.populate_demo_suppliers()
        first_five = catalog.all_categories()[:5]
        assert report.corpus_size == 50
        assert report.categories_covered == 5
        for category in first_five:
            assert len(store.suppliers_in_category(category)) == 10

    def test_all_suppliers_cover_taxonomy(self, store, small_catalog, clock):
        """All-supplier mode reaches every subcategory."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=3)
        report = orch.populate_all_suppliers()
        assert report.subcategories_covered == 5
        assert 5 * 5 <= report.corpus_size <= 5 * 10

    def test_all_suppliers_replace(self, store, small_catalog, clock):
        """A second all-supplier run replaces the first."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=3)
        orch.populate_all_suppliers()
        report = orch.populate_all_suppliers()
        assert len(store.suppliers) == report.records_generated

    def test_category_mode_appends(self, orchestrator, store):
        """Category mode appends to the existing suppliers."""
        orchestrator.populate_demo_suppliers()
        before = len(store.suppliers)
        report = orchestrator.generate_category_suppliers("Chemical")
        assert len(store.suppliers) == before + report.records_generated
        assert report.corpus_size == len(store.suppliers)
        assert len(store.suppliers_in_category("Chemical")) >= report.records_generated

    def test_category_mode_twice_appends_twice(self, store, small_catalog, clock):
        """Repeated category runs accumulate."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=3)
        first = orch.generate_category_suppliers("Chemical")
        second = orch.generate_category_suppliers("Chemical")
        assert len(store.suppliers) == first.records_generated + second.records_generated

    def test_category_mode_unknown(self, orchestrator, store):
        """Unknown category raises and leaves the store unchanged."""
        with pytest.raises(UnknownTaxonomyKey):
            orchestrator.generate_category_suppliers("Spaceships")
        assert not store.is_populated

    def test_supplier_ids_continue_across_calls(self, store, small_catalog, clock):
        """Supplier IDs stay unique across appends from one orchestrator."""
        orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=3)
        orch.generate_category_suppliers("Agriculture")
        orch.generate_category_suppliers("Chemical")
        ids = [s.company_id for s in store.suppliers]
        assert len(set(ids)) == len(ids)


class TestReporting:
    """Tests for PopulationReport and progress output."""

    def test_report_fields(self, orchestrator):
        """Report carries mode, counts, coverage and timing."""
        report = orchestrator.populate_quick_rfqs(20)
        assert report.mode == "quick_rfqs"
        assert report.elapsed_ms >= 0
        assert 1 <= report.categories_covered <= 10
        assert report.subcategories_covered >= 1
        assert set(report.to_dict()) == {
            "mode",
            "records_generated",
            "corpus_size",
            "categories_covered",
            "subcategories_covered",
            "elapsed_ms",
        }

    def test_silent_by_default(self, orchestrator, capsys):
        """No output unless verbose."""
        orchestrator.populate_quick_rfqs(5)
        assert capsys.readouterr().out == ""

    def test_verbose_progress(self, store, small_catalog, clock, capsys):
        """Verbose mode prints start and summary lines."""
        orch = PopulationOrchestrator(
            store, catalog=small_catalog, clock=clock, seed=1, verbose=True
        )
        orch.populate_quick_rfqs(5)
        out = capsys.readouterr().out
        assert "Quick RFQ population" in out
        assert "Generated: 5 records" in out


class TestDeterminism:
    """Same seed and clock give the same corpus."""

    def test_same_seed_same_corpus(self, small_catalog, clock):
        """Two runs with seed 7 produce identical records."""
        corpora = []
        for _ in range(2):
            store = CorpusStore()
            orch = PopulationOrchestrator(store, catalog=small_catalog, clock=clock, seed=7)
            orch.populate_quick_rfqs(20)
            orch.populate_all_suppliers()
            corpora.append(
                ([r.to_dict() for r in store.rfqs], [s.to_dict() for s in store.suppliers])
            )
        assert corpora[0] == corpora[1]

    def test_config_overrides(self, store, small_catalog, clock):
        """GenerationConfig changes supplier counts."""
        config = GenerationConfig(suppliers_per_subcategory=(2, 2))
        orch = PopulationOrchestrator(
            store, catalog=small_catalog, config=config, clock=clock, seed=1
        )
        report = orch.populate_all_suppliers()
        assert report.corpus_size == 5 * 2


class TestCorpusStore:
    """Tests for CorpusStore."""

    def test_set_rfq_status(self, store, make_rfq):
        """set_rfq_status updates one RFQ in place."""
        rfq = make_rfq()
        store.replace_rfqs([rfq])
        store.set_rfq_status(rfq.id, "Closed")
        assert store.get_rfq(rfq.id).status is RFQStatus.CLOSED

    def test_set_rfq_status_unknown(self, store):
        """Unknown IDs raise KeyError."""
        with pytest.raises(KeyError):
            store.set_rfq_status("rfq_missing", RFQStatus.CLOSED)

    def test_independent_stores(self, make_rfq):
        """Stores do not share state."""
        a, b = CorpusStore(), CorpusStore()
        a.replace_rfqs([make_rfq()])
        assert a.is_populated
        assert not b.is_populated

    def test_clear(self, store, make_rfq):
        """clear() empties both lists and the indexes."""
        rfq = make_rfq()
        store.replace_rfqs([rfq])
        store.clear()
        assert not store.is_populated
        assert store.get_rfq(rfq.id) is None
